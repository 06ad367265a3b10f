import abc
import logging

import numpy as np
import pandas as pd

from scipy import sparse
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

logger = logging.getLogger(__name__)


# fixed category domain for each column, taken from the full population
def build_domain(df, columns):
    return {c: sorted(df[c].fillna('missing').astype(str).unique().tolist()) for c in columns}


# class which applies a single-column transformer to multiple columns
class ColumnTransformer(TransformerMixin, BaseEstimator, metaclass=abc.ABCMeta):

    def __init__(self, columns, domain=None, handle_unknown='other'):
        self.columns = columns
        self.domain = domain
        self.handle_unknown = handle_unknown

    @abc.abstractmethod
    def transformer(self, categories):
        pass

    def fit(self, X, y=None):
        assert isinstance(X, pd.DataFrame)
        domain = self.domain or {}
        self.transformers_ = []
        for c in self.columns:
            trans = self.transformer(domain.get(c))
            trans.fit(X[c])
            self.transformers_.append((c, trans))
        return self

    def transform(self, X):
        check_is_fitted(self, 'transformers_')
        Xs = [trans.transform(X[c]) for c, trans in self.transformers_]

        if any(sparse.issparse(f) for f in Xs):
            return sparse.hstack(Xs).tocsr()
        return np.column_stack(Xs)

    # per-record report of values outside the fixed domain
    def find_unknown(self, X):
        check_is_fitted(self, 'transformers_')
        frames = []
        for c, trans in self.transformers_:
            unknown = trans.unknown_mask(X[c])
            frames.append(pd.DataFrame({'row': X.index[unknown], 'column': c,
                                        'value': X[c][unknown].to_numpy()}))
        return pd.concat(frames, ignore_index=True)
