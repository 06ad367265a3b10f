import logging
import os

import numpy as np
import pandas as pd

from .errors import LabelDerivationError, LoadError
from .variables import age_var, claim_var, drg_var, label_var, los_var, sex_var, str_var

logger = logging.getLogger(__name__)


# read the claims file; categorical codes stay strings
def load_claims(path, columns=claim_var):
    if not os.path.isfile(path):
        raise LoadError('Claims file not found: %s' % path)

    try:
        claims = pd.read_csv(path, dtype={c: str for c in str_var}, na_filter=True,
                             na_values=['?', 'None'])
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise LoadError('Could not read %s: %s' % (path, e))

    missing = [c for c in columns if c not in claims.columns]
    if missing:
        raise LoadError('%s is missing column(s): %s' % (path, ', '.join(missing)))

    for c in str_var:
        if c in claims.columns:
            claims[c] = claims[c].str.strip()

    logger.info('Loaded %d claims from %s', len(claims), path)
    return claims


# 1 for the top length-of-stay bucket, 0 for the others, <NA> outside the domain
def derive_long_stay(codes, top_code=4, codes_domain=(1, 2, 3, 4)):
    codes = pd.to_numeric(pd.Series(codes), errors='coerce')
    label = pd.Series(pd.NA, index=codes.index, dtype='Int64')
    defined = codes.isin(list(codes_domain))
    label[defined] = (codes[defined] == top_code).astype(int)
    return label


# attach the label; rows with an undefined label are split off, never coerced
def label_claims(claims, top_code=4, codes_domain=(1, 2, 3, 4), strict=False):
    label = derive_long_stay(claims[los_var], top_code, codes_domain)
    undefined = label.isna().to_numpy()

    if undefined.any():
        rows = np.flatnonzero(undefined).tolist()
        values = claims[los_var][undefined].astype(str).unique().tolist()
        msg = '%d claim(s) have a length-of-stay code outside %s: %s' % \
            (len(rows), list(codes_domain), ', '.join(values[:10]))
        if strict:
            raise LabelDerivationError(msg, rows)
        logger.warning(msg)

    claims = claims.copy()
    claims[label_var] = label
    labelled = claims[~undefined].copy()
    labelled[label_var] = labelled[label_var].astype(int)
    return labelled, claims[undefined]


# summary counts for the report
def summarize_claims(claims):
    return {
        'n_claims': len(claims),
        'by_sex': claims[sex_var].value_counts(dropna=False).sort_index(),
        'by_age': claims[age_var].value_counts(dropna=False).sort_index(),
        'n_drg': int(claims[drg_var].nunique())
    }
