import logging
from collections import namedtuple

import numpy as np

from sklearn.base import BaseEstimator, ClassifierMixin, clone
from sklearn.linear_model import LogisticRegression
from sklearn.naive_bayes import CategoricalNB
from sklearn.neighbors import KNeighborsClassifier
from sklearn.pipeline import Pipeline
from sklearn.svm import SVC
from sklearn.utils.validation import check_is_fitted

from .errors import FitError
from .one_hot import OneHotEncoder, OrdinalEncoder
from .util import add_dict_prefix, distinct_rows
from .variables import cat_var

logger = logging.getLogger(__name__)

Variant = namedtuple('Variant', ['name', 'estimator', 'dedupe'])


# fits the wrapped estimator, optionally on distinct (label, features) rows only
class DistinctRowsClassifier(ClassifierMixin, BaseEstimator):

    def __init__(self, estimator, dedupe=True):
        self.estimator = estimator
        self.dedupe = dedupe

    def fit(self, X, y):
        n_rows = len(X)
        if self.dedupe:
            X, y = distinct_rows(X, y)
            logger.debug('Training on %d distinct of %d rows', len(X), n_rows)

        check_neighbors(self.estimator, len(X))
        if len(np.unique(y)) < 2:
            raise FitError('Training labels have a single class: %s' % np.unique(y).tolist())

        estimator = clone(self.estimator)
        size_categories(estimator, X)
        self.estimator_ = estimator.fit(X, y)
        self.classes_ = self.estimator_.classes_
        self.n_train_ = len(X)
        return self

    def predict(self, X):
        check_is_fitted(self, 'estimator_')
        return self.estimator_.predict(X)

    def predict_proba(self, X):
        check_is_fitted(self, 'estimator_')
        return self.estimator_.predict_proba(X)

    @property
    def final_estimator(self):
        check_is_fitted(self, 'estimator_')
        est = self.estimator_
        return est.steps[-1][-1] if isinstance(est, Pipeline) else est


# naive bayes needs a slot for every encoded level, 'other' included
def size_categories(estimator, X):
    if not isinstance(estimator, Pipeline):
        return
    enc, (name, model) = estimator.steps[0][-1], estimator.steps[-1]
    if isinstance(enc, OrdinalEncoder) and isinstance(model, CategoricalNB):
        n_categories = clone(enc).fit(X).n_categories
        estimator.set_params(**{'%s__min_categories' % name: n_categories})


# neighbor voting needs at least k training rows
def check_neighbors(estimator, n_rows):
    if isinstance(estimator, Pipeline):
        estimator = estimator.steps[-1][-1]
    if isinstance(estimator, KNeighborsClassifier) and n_rows < estimator.n_neighbors:
        raise FitError('%d training rows but n_neighbors=%d' % (n_rows, estimator.n_neighbors))


# step name and model for each variant
def make_model(name, domain, handle_unknown):
    if name == 'nb':
        enc = OrdinalEncoder(cat_var, domain=domain, handle_unknown=handle_unknown)
        return [('enc', enc), ('nb', CategoricalNB())]

    enc = OneHotEncoder(cat_var, domain=domain, handle_unknown=handle_unknown)
    if name == 'knn':
        return [('enc', enc), ('knn', KNeighborsClassifier())]
    if name == 'lr':
        return [('enc', enc), ('lr', LogisticRegression())]
    if name == 'svm':
        return [('enc', enc), ('svm', SVC())]

    raise ValueError('Unknown model variant: %s' % name)


# build the variants named in the config, in priority order
def make_variants(config, domain=None):
    variants = []
    for name in config['priority']:
        settings = config['variants'].get(name, {})
        steps = make_model(name, domain, config.get('handle_unknown', 'other'))
        pipeline = Pipeline(steps=steps)
        pipeline.set_params(**add_dict_prefix(settings.get('params', {}), steps[-1][0]))

        dedupe = bool(settings.get('dedupe', True))
        variants.append(Variant(name, DistinctRowsClassifier(pipeline, dedupe=dedupe), dedupe))

    return variants
