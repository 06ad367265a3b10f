import numpy as np
import pandas as pd
import pytest

from inpatient import load_config
from inpatient.variables import age_var, drg_var, los_var, pmt_var, prcdr_var, sex_var


# synthetic inpatient claims; long stays are likelier for some DRGs and older ages
def make_claims(n=800, seed=0):
    rng = np.random.RandomState(seed)
    sex = rng.choice(['1', '2'], size=n)
    age = rng.choice(['1', '2', '3', '4', '5', '6'], size=n)
    drg = rng.choice(['%03d' % i for i in range(1, 13)], size=n)

    p_long = 0.1 + 0.05 * age.astype(int) + 0.3 * np.isin(drg, ['001', '002', '003'])
    long_stay = rng.rand(n) < p_long
    days = np.where(long_stay, 4, rng.choice([1, 2, 3], size=n))

    return pd.DataFrame({
        sex_var: sex,
        age_var: age,
        drg_var: drg,
        prcdr_var: rng.choice(['3893', '8154', ''], size=n),
        los_var: days,
        pmt_var[0]: rng.randint(5000, 40000, size=n),
        pmt_var[1]: rng.choice(['1', '2', '3', '4', '5'], size=n)
    })


@pytest.fixture
def claims():
    return make_claims()


@pytest.fixture
def claims_csv(tmp_path, claims):
    path = tmp_path / 'claims.csv'
    claims.to_csv(path, index=False)
    return str(path)


@pytest.fixture
def config():
    config = load_config(None)
    config['variants']['knn']['params']['n_neighbors'] = 15
    return config
