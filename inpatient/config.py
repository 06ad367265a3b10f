import copy
import logging

import yaml

from .errors import ConfigError
from .util import merge_dict
from .variables import variant_order

logger = logging.getLogger(__name__)

# built-in defaults; model_param.yaml overrides any of these
defaults = {
    'seed': 1,
    'pool_size': 0.8,
    'train_size': 0.8,
    'sparse_strata': 'warn',
    'handle_unknown': 'other',
    'label': {
        'top_code': 4,
        'codes': [1, 2, 3, 4]
    },
    'priority': list(variant_order),
    'variants': {
        'nb': {'dedupe': False, 'params': {'alpha': 1}},
        'knn': {'dedupe': True, 'params': {'n_neighbors': 300}},
        'lr': {'dedupe': True, 'params': {'max_iter': 1000}},
        'svm': {'dedupe': True, 'params': {'kernel': 'linear'}}
    }
}


def load_config(path='model_param.yaml'):
    config = copy.deepcopy(defaults)
    if path is None:
        return config

    try:
        with open(path, 'r') as f:
            override = yaml.safe_load(f)
    except IOError:
        logger.info('No config at %s, using defaults', path)
        return config
    except yaml.YAMLError as e:
        raise ConfigError('Could not parse %s: %s' % (path, e))

    if override is None:
        return config
    if not isinstance(override, dict):
        raise ConfigError('%s must contain a mapping, got %s' % (path, type(override).__name__))

    return merge_dict(config, override)
