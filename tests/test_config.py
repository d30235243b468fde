"""Tests for configuration loading and saving."""
import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from cyclecomplete.candidates import SortOrder
from cyclecomplete.config import Config, CONFIG_GROUP


def test_defaults_without_file(tmp_path):
    config = Config(tmp_path / 'missing.json')
    assert config.sort_order == SortOrder.BY_DISTANCE
    assert config.candidates_limit == 12
    assert config.distance_limit_kb == 0
    assert config.skip_fuzzy_if_exact is False
    assert config.remove_trailing_word_part is False


def test_save_and_reload(tmp_path):
    path = tmp_path / 'sub' / 'config.json'
    config = Config(path)
    config.sort_order = SortOrder.ALPHABETICAL
    config.candidates_limit = 30
    config.distance_limit_kb = 4
    config.skip_fuzzy_if_exact = True
    config.remove_trailing_word_part = True
    config.save()

    with open(path) as f:
        stored = json.load(f)
    assert stored[CONFIG_GROUP] == {
        'sort_order': 0,
        'candidates_limit': 30,
        'distance_limit': 4096,
        'skip_fuzzy_if_exact': True,
        'remove_trailing_word_part': True,
    }

    reloaded = Config(path)
    assert reloaded.sort_order == SortOrder.ALPHABETICAL
    assert reloaded.candidates_limit == 30
    assert reloaded.distance_limit_kb == 4
    assert reloaded.skip_fuzzy_if_exact is True
    assert reloaded.remove_trailing_word_part is True


def test_save_keeps_other_groups(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({'editor': {'font': 'Mono'}}))
    config = Config(path)
    config.candidates_limit = 5
    config.save()
    stored = json.loads(path.read_text())
    assert stored['editor'] == {'font': 'Mono'}
    assert stored[CONFIG_GROUP]['candidates_limit'] == 5


def test_malformed_file_uses_defaults(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text('{not json')
    config = Config(path)
    assert config.candidates_limit == 12


def test_invalid_values_use_defaults(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({CONFIG_GROUP: {
        'sort_order': 7,
        'candidates_limit': 0,
        'distance_limit': 'far',
        'skip_fuzzy_if_exact': 1,
    }}))
    config = Config(path)
    assert config.sort_order == SortOrder.BY_DISTANCE
    assert config.candidates_limit == 12
    assert config.distance_limit_kb == 0
    assert config.skip_fuzzy_if_exact is True


def test_unknown_key_rejected(tmp_path):
    config = Config(tmp_path / 'config.json')
    with pytest.raises(KeyError):
        config.set('hotkey', 'ctrl+space')


def test_save_failure_raises(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('')
    config = Config(blocker / 'config.json')
    with pytest.raises(OSError):
        config.save()
