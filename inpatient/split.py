import logging
from collections import namedtuple

import numpy as np
import pandas as pd

from sklearn.model_selection import train_test_split

from .errors import PartitionError

logger = logging.getLogger(__name__)

Partition = namedtuple('Partition', ['train', 'validation', 'test'])

# a stratum needs a member on each side of the split
min_stratum_size = 2


def stratified_split(index, strata, train_size, seed, sparse='raise'):
    """
    Splits `index` into two disjoint, sorted index arrays of roughly
    `train_size` and `1 - train_size` of its length, keeping the relative
    frequency of each level of `strata` on both sides.

    Strata with fewer than two members can't land on both sides:
      - 'raise': raise PartitionError
      - 'warn': log and put those records on the first side only
      - 'drop': log and leave those records out of both sides
    """
    if sparse not in ('raise', 'warn', 'drop'):
        raise ValueError("sparse must be one of 'raise', 'warn', 'drop', got %r" % sparse)

    index = np.asarray(index)
    strata = pd.Series(np.asarray(strata, dtype=object)).fillna('missing').astype(str).to_numpy()
    if len(index) != len(strata):
        raise PartitionError('Index and strata differ in length: %d vs %d' % (len(index), len(strata)))

    levels, counts = np.unique(strata, return_counts=True)
    sparse_levels = levels[counts < min_stratum_size]
    held = np.isin(strata, sparse_levels)

    if held.any():
        msg = '%d stratum level(s) with fewer than %d members: %s' % \
            (len(sparse_levels), min_stratum_size, ', '.join(sparse_levels[:10]))
        if sparse == 'raise':
            raise PartitionError(msg)
        logger.warning('%s (%s %d record(s))', msg,
                       'keeping on first side' if sparse == 'warn' else 'dropping', held.sum())

    try:
        left, right = train_test_split(index[~held], train_size=train_size,
                                       stratify=strata[~held], random_state=seed)
    except ValueError as e:
        raise PartitionError('Stratified split failed: %s' % e)

    if sparse == 'warn':
        left = np.concatenate([left, index[held]])

    return np.sort(left), np.sort(right)


# train-pool / test, then train / validation within the pool, same strata
def partition(claims, column, seed, pool_size=0.8, train_size=0.8, sparse='raise'):
    pool, test = stratified_split(claims.index, claims[column], pool_size, seed, sparse)
    train, validation = stratified_split(pool, claims.loc[pool, column], train_size, seed, sparse)

    logger.info('Partitioned %d claims: train %d, validation %d, test %d',
                len(claims), len(train), len(validation), len(test))
    return Partition(train, validation, test)
