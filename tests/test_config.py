import os

import pytest

from inpatient import ConfigError, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / 'missing.yaml'))
    assert config['seed'] == 1
    assert config['variants']['knn']['params']['n_neighbors'] == 300
    assert config['label']['top_code'] == 4


def test_file_overrides_nested_keys(tmp_path):
    path = tmp_path / 'model_param.yaml'
    path.write_text('seed: 42\nvariants:\n  knn:\n    params:\n      n_neighbors: 25\n')
    config = load_config(str(path))
    assert config['seed'] == 42
    assert config['variants']['knn']['params']['n_neighbors'] == 25
    assert config['variants']['knn']['dedupe'] is True
    assert config['variants']['nb']['params']['alpha'] == 1


def test_defaults_are_not_shared():
    a = load_config(None)
    a['variants']['nb']['params']['alpha'] = 5
    assert load_config(None)['variants']['nb']['params']['alpha'] == 1


def test_non_mapping_file(tmp_path):
    path = tmp_path / 'model_param.yaml'
    path.write_text('- 1\n- 2\n')
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_repo_config_matches_defaults():
    path = os.path.join(os.path.dirname(__file__), '..', 'model_param.yaml')
    assert load_config(path) == load_config(None)
