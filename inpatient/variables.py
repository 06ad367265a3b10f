# column names from the inpatient claims file
sex_var = 'BENE_SEX_IDENT_CD'
age_var = 'BENE_AGE_CAT_CD'
drg_var = 'IP_CLM_BASE_DRG_CD'
prcdr_var = 'IP_CLM_ICD9_PRCDR_CD'
los_var = 'IP_CLM_DAYS_CD'
pmt_var = ['IP_DRG_QUINT_PMT_AVG', 'IP_DRG_QUINT_PMT_CD']

claim_var = [sex_var, age_var, drg_var, prcdr_var, los_var] + pmt_var

# predictors used by every model
cat_var = [sex_var, age_var, drg_var]

# read as strings so codes like '012' keep their leading zeros
str_var = [sex_var, age_var, drg_var, prcdr_var, pmt_var[1]]

label_var = 'long_stay'

# tie-break order for model selection
variant_order = ['nb', 'knn', 'lr', 'svm']
