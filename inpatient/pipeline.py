import logging
from collections import namedtuple

import numpy as np

from .classifiers import make_variants
from .column_transformer import build_domain
from .data import label_claims, load_claims, summarize_claims
from .harness import evaluate_variants, select_variant
from .metrics import score_model
from .one_hot import OneHotEncoder
from .plot import plot_naive_bayes
from .split import partition
from .variables import cat_var, label_var, los_var

logger = logging.getLogger(__name__)

PipelineResult = namedtuple('PipelineResult', [
    'summary', 'undefined', 'partition', 'unknown', 'validation', 'failures',
    'selected', 'test', 'plot_path'
])


# validation/test values never seen in the training rows, one line per record and column
def find_unseen(X_train, X_other):
    checker = OneHotEncoder(cat_var).fit(X_train)
    unknown = checker.find_unknown(X_other)
    if len(unknown):
        logger.warning('%d value(s) in validation/test rows not seen in training', len(unknown))
    return unknown


def run_pipeline(path, config, plot_path=None, n_jobs=1):
    """
    Load -> label -> partition -> encode -> fit/score each variant on the
    validation rows -> pick the best -> score it once on the test rows.
    """
    np.random.seed(config['seed'])

    claims = load_claims(path)
    summary = summarize_claims(claims)

    label = config['label']
    labelled, undefined = label_claims(claims, label['top_code'], label['codes'])
    labelled = labelled.reset_index(drop=True)

    part = partition(labelled, los_var, config['seed'], pool_size=config['pool_size'],
                     train_size=config['train_size'], sparse=config['sparse_strata'])

    # category domain is fixed from every loaded claim, not just the training rows
    domain = build_domain(claims, cat_var)
    X, y = labelled[cat_var], labelled[label_var].to_numpy()
    X_train, y_train = X.loc[part.train], y[part.train]
    X_val, y_val = X.loc[part.validation], y[part.validation]
    X_test, y_test = X.loc[part.test], y[part.test]

    unknown = find_unseen(X_train, X.loc[np.concatenate([part.validation, part.test])])

    variants = make_variants(config, domain)
    validation, failures = evaluate_variants(variants, X_train, y_train, X_val, y_val, n_jobs=n_jobs)

    if plot_path and 'nb' in validation:
        plot_naive_bayes(validation['nb'].model, plot_path)
    else:
        plot_path = None

    rates = {name: e.rate for name, e in validation.items()}
    selected = select_variant(rates, config['priority'])
    test = score_model(selected, validation[selected].model, X_test, y_test)
    logger.info('Test misclassification rate for %s: %.4f', selected, test.rate)

    return PipelineResult(summary, undefined, part, unknown, validation, failures,
                          selected, test, plot_path)


def print_report(result):
    summary = result.summary
    print('Claims: %d' % summary['n_claims'])
    print('Claims by sex:')
    print(summary['by_sex'].to_string())
    print('Claims by age category:')
    print(summary['by_age'].to_string())
    print('Distinct DRG codes: %d' % summary['n_drg'])
    if len(result.undefined):
        print('Claims with undefined label: %d' % len(result.undefined))

    part = result.partition
    print('Train / validation / test: %d / %d / %d' % (len(part.train), len(part.validation), len(part.test)))
    if len(result.unknown):
        print('Validation/test values not seen in training:')
        print(result.unknown.to_string(index=False))
    if result.plot_path:
        print('Naive bayes plot: %s' % result.plot_path)

    for name, evaluation in result.validation.items():
        print('%s validation confusion matrix:' % name.upper())
        print(evaluation.confusion)
        print('%s validation misclassification rate: %.4f' % (name.upper(), evaluation.rate))

    for name, error in result.failures.items():
        print('%s failed: %s' % (name.upper(), error))

    print('Selected model: %s' % result.selected.upper())
    print('%s test confusion matrix:' % result.selected.upper())
    print(result.test.confusion)
    print('%s test misclassification rate: %.4f' % (result.selected.upper(), result.test.rate))
