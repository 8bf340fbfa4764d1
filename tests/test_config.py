"""Tests for StoreConfig."""

import pytest

from pyflatstore import ErrorPolicy, StoreConfig


def test_defaults():
    config = StoreConfig(path='users.txt')
    assert config.encoding == 'utf-8'
    assert config.section_tag == 'user'
    assert config.policy is ErrorPolicy.CONTINUE
    assert config.autoload


def test_policy_by_name():
    assert StoreConfig(path='x', policy=' STRICT ').policy \
        is ErrorPolicy.STRICT
    with pytest.raises(ValueError):
        StoreConfig(path='x', policy='sometimes')


def test_non_string_policy_from_yaml(tmp_path):
    cfg = tmp_path / 'store.yaml'
    cfg.write_text('path: u.txt\npolicy: 1\n', encoding='utf-8')
    with pytest.raises(ValueError):
        StoreConfig.from_yaml(cfg)


def test_from_mapping_warns_unknown_keys():
    with pytest.warns(UserWarning, match='colour'):
        config = StoreConfig.from_mapping({'path': 'x', 'colour': 'red'})
    assert config.path == 'x'


def test_from_mapping_requires_path():
    with pytest.raises(ValueError):
        StoreConfig.from_mapping({'encoding': 'gbk'})


def test_from_yaml(tmp_path):
    cfg = tmp_path / 'store.yaml'
    cfg.write_text(
        'path: data/users.txt\n'
        'encoding: gbk\n'
        'policy: raise_enum\n'
        'autoload: false\n', encoding='utf-8')
    config = StoreConfig.from_yaml(cfg)
    assert config.path == str(tmp_path / 'data' / 'users.txt')
    assert config.encoding == 'gbk'
    assert config.policy is ErrorPolicy.RAISE_ENUM
    assert config.autoload is False


def test_from_yaml_rejects_non_mapping(tmp_path):
    cfg = tmp_path / 'store.yaml'
    cfg.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ValueError):
        StoreConfig.from_yaml(cfg)


def test_yaml_round_trip(tmp_path):
    config = StoreConfig(path=str(tmp_path / 'u.txt'), policy='strict')
    cfg = tmp_path / 'store.yaml'
    cfg.write_text(config.to_yaml(), encoding='utf-8')
    assert StoreConfig.from_yaml(cfg) == config
