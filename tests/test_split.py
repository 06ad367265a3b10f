import numpy as np
import pandas as pd
import pytest

from inpatient import PartitionError, partition, stratified_split
from inpatient.variables import los_var


def _strata():
    return np.array(['a'] * 60 + ['b'] * 30 + ['c'] * 10)


def test_split_is_disjoint_and_covers():
    index = np.arange(100)
    left, right = stratified_split(index, _strata(), 0.8, seed=1)
    assert len(np.intersect1d(left, right)) == 0
    assert np.array_equal(np.sort(np.concatenate([left, right])), index)
    assert len(left) == 80
    assert len(right) == 20


def test_split_preserves_strata():
    strata = _strata()
    left, right = stratified_split(np.arange(100), strata, 0.8, seed=1)
    assert (strata[right] == 'a').sum() == 12
    assert (strata[right] == 'b').sum() == 6
    assert (strata[right] == 'c').sum() == 2


def test_split_is_deterministic():
    a = stratified_split(np.arange(100), _strata(), 0.8, seed=7)
    b = stratified_split(np.arange(100), _strata(), 0.8, seed=7)
    assert np.array_equal(a[0], b[0])
    assert np.array_equal(a[1], b[1])


def test_singleton_stratum_raises():
    strata = np.append(_strata(), 'd')
    with pytest.raises(PartitionError):
        stratified_split(np.arange(101), strata, 0.8, seed=1, sparse='raise')


def test_singleton_stratum_lands_on_one_side():
    strata = np.append(_strata(), 'd')
    left, right = stratified_split(np.arange(101), strata, 0.8, seed=1, sparse='warn')
    assert 100 in left
    assert 100 not in right
    assert np.array_equal(np.sort(np.concatenate([left, right])), np.arange(101))


def test_singleton_stratum_dropped():
    strata = np.append(_strata(), 'd')
    left, right = stratified_split(np.arange(101), strata, 0.8, seed=1, sparse='drop')
    assert 100 not in left
    assert 100 not in right
    assert len(left) + len(right) == 100


def test_split_rejects_unknown_mode():
    with pytest.raises(ValueError):
        stratified_split(np.arange(100), _strata(), 0.8, seed=1, sparse='ignore')


def test_partition_three_way(claims):
    part = partition(claims, los_var, seed=1)
    train, validation, test = set(part.train), set(part.validation), set(part.test)
    assert not train & validation
    assert not train & test
    assert not validation & test
    assert train | validation | test == set(claims.index)
    assert len(part.test) == 160
    assert len(part.validation) == 128


def test_partition_keeps_label_balance(claims):
    part = partition(claims, los_var, seed=1)
    overall = (claims[los_var] == 4).mean()
    for idx in part:
        assert abs((claims.loc[idx, los_var] == 4).mean() - overall) < 0.02


def test_partition_with_non_range_index(claims):
    claims.index = claims.index + 1000
    part = partition(claims, los_var, seed=3)
    assert set(np.concatenate(part)) == set(claims.index)
    assert isinstance(part.train, np.ndarray)
    assert pd.Index(part.train).is_monotonic_increasing
