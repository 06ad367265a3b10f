import logging

import numpy as np
import pandas as pd

from scipy import sparse
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted, column_or_1d

from .column_transformer import ColumnTransformer
from .errors import EncodingError

logger = logging.getLogger(__name__)

# sentinel level for values outside the fixed domain
OTHER = 'other'


def _as_str(y):
    y = column_or_1d(np.asarray(y, dtype=object), warn=True)
    return pd.Series(y).fillna('missing').astype(str).to_numpy(dtype=str)


# labeler over a fixed domain which maps unseen values to 'other'
class LabelEncoder(TransformerMixin, BaseEstimator):

    def __init__(self, categories=None, handle_unknown='other'):
        self.categories = categories
        self.handle_unknown = handle_unknown

    # include 'other' category
    @property
    def classes(self):
        return [str(c) for c in self.classes_.tolist()] + [OTHER]

    def fit(self, y=None):
        if self.handle_unknown not in ('other', 'error'):
            raise ValueError("handle_unknown must be 'other' or 'error', got %r" % self.handle_unknown)
        if self.categories is not None:
            classes = [str(c) for c in self.categories]
        else:
            classes = _as_str(y)
        self.classes_ = np.unique(np.asarray(classes, dtype=str))
        return self

    def unknown_mask(self, y):
        check_is_fitted(self, 'classes_')
        return ~np.isin(_as_str(y), self.classes_)

    def transform(self, y):
        check_is_fitted(self, 'classes_')
        y2 = _as_str(y)

        new_label = ~np.isin(y2, self.classes_)
        if new_label.any():
            rows = np.flatnonzero(new_label)
            name = getattr(y, 'name', None)
            if self.handle_unknown == 'error':
                raise EncodingError(name, np.unique(y2[new_label]), rows)
            logger.warning('%s: %d record(s) outside the encoding domain mapped to %r',
                           name, len(rows), OTHER)

        labels = np.searchsorted(self.classes_, y2)
        labels[new_label] = len(self.classes_)
        return labels


# one-hot encoder for a single column; the 'other' column is dropped
class OneHotEncoderBase(TransformerMixin, BaseEstimator):

    def __init__(self, categories=None, handle_unknown='other'):
        self.categories = categories
        self.handle_unknown = handle_unknown

    def fit(self, X, y=None):
        self.label_encoder_ = LabelEncoder(self.categories, self.handle_unknown).fit(X)
        return self

    def unknown_mask(self, X):
        return self.label_encoder_.unknown_mask(X)

    def transform(self, X):
        check_is_fitted(self, 'label_encoder_')
        n_row, n_col = len(X), len(self.label_encoder_.classes)
        df_col = self.label_encoder_.transform(X)
        df_row = np.arange(n_row)
        df_val = np.ones(n_row)

        df = sparse.coo_matrix((df_val, (df_row, df_col)), shape=(n_row, n_col)).tocsr()
        return df[:, :-1]

    def get_feature_names(self):
        return self.label_encoder_.classes[:-1]


# integer codes for multiple categoricals
class OrdinalEncoder(ColumnTransformer):

    def transformer(self, categories):
        return LabelEncoder(categories, self.handle_unknown)

    # domain size plus the 'other' level, per column
    @property
    def n_categories(self):
        check_is_fitted(self, 'transformers_')
        return [len(trans.classes) for _, trans in self.transformers_]


# dummy encoding for multiple categoricals
class OneHotEncoder(ColumnTransformer):

    def transformer(self, categories):
        return OneHotEncoderBase(categories, self.handle_unknown)

    def get_feature_names(self):
        check_is_fitted(self, 'transformers_')
        feature_names = []
        for name, trans in self.transformers_:
            feature_names.extend(['is_%s_%s' % (name, i) for i in trans.get_feature_names()])
        return feature_names
