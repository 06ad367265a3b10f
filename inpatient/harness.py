import logging
from collections import OrderedDict

from joblib import Parallel, delayed
from sklearn.base import clone

from .errors import EncodingError, FitError, SelectionError
from .metrics import score_model
from .variables import variant_order

logger = logging.getLogger(__name__)


def fit_variant(variant, X, y):
    return clone(variant.estimator).fit(X, y)


def predict_variant(model, X):
    return model.predict(X)


# fit on train and score on target; a FitError or EncodingError only sinks this variant
def _evaluate_one(variant, X_train, y_train, X_target, y_target):
    try:
        model = fit_variant(variant, X_train, y_train)
        evaluation = score_model(variant.name, model, X_target, y_target)
    except (FitError, EncodingError) as e:
        return variant.name, None, e
    return variant.name, evaluation, None


def evaluate_variants(variants, X_train, y_train, X_target, y_target, n_jobs=1):
    """
    Fits every variant on the training rows and scores it on the target rows.
    The variants share nothing, so `n_jobs` other than 1 fits them in
    parallel. Returns (evaluations, failures), both keyed by variant name in
    the order the variants were given.
    """
    results = Parallel(n_jobs=n_jobs)(
        delayed(_evaluate_one)(v, X_train, y_train, X_target, y_target) for v in variants)

    evaluations, failures = OrderedDict(), OrderedDict()
    for name, evaluation, error in results:
        if error is not None:
            logger.warning('Variant %s failed: %s', name, error)
            failures[name] = error
        else:
            logger.info('Variant %s misclassification rate: %.4f', name, evaluation.rate)
            evaluations[name] = evaluation

    return evaluations, failures


# lowest rate wins; ties go to the earlier variant in `priority`
def select_variant(rates, priority=variant_order):
    candidates = [(rates[name], i, name) for i, name in enumerate(priority) if name in rates]
    if not candidates:
        raise SelectionError('No variant to select from: %s' % list(rates))

    rate, _, name = min(candidates)
    logger.info('Selected %s with validation misclassification rate %.4f', name, rate)
    return name
