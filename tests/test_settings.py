import os

import pytest
from pydantic import ValidationError

from jamcodec.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, CodecSettings, get_global_settings
from jamcodec.conf.get_settings import CONFIG_YAML_ENV_VAR, get_settings_source
from jamcodec.utils.yaml import dict_from_extended_yaml, dict_from_yaml


def test_defaults():
    settings = CodecSettings()
    assert settings.MAX_NESTING_DEPTH == 128
    assert settings.MAX_ENCODED_SIZE is None


def test_bundled_default_matches_model_defaults():
    assert CodecSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH) == CodecSettings()


def test_bundled_unittests_settings():
    settings = CodecSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings.MAX_NESTING_DEPTH == 32
    assert settings.MAX_ENCODED_SIZE == 1024 * 1024


def test_global_settings_come_from_env():
    settings = get_global_settings()
    assert get_settings_source() == os.environ[CONFIG_YAML_ENV_VAR]
    # same instance every time
    assert get_global_settings() is settings


def test_global_settings_cannot_change_source(monkeypatch):
    get_global_settings()
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH + '.other')
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_global_settings()


def test_settings_are_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.MAX_NESTING_DEPTH = 1  # type: ignore[misc]


@pytest.mark.parametrize('kwargs', [
    dict(MAX_NESTING_DEPTH=0),
    dict(MAX_NESTING_DEPTH=-1),
    dict(MAX_ENCODED_SIZE=0),
    dict(UNKNOWN_SETTING=1),
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        CodecSettings(**kwargs)


def test_from_yaml(tmp_path):
    filepath = tmp_path / 'settings.yml'
    filepath.write_text('MAX_NESTING_DEPTH: 10\nMAX_ENCODED_SIZE: 500\n')
    assert CodecSettings.from_yaml(filepath=filepath) == CodecSettings(MAX_NESTING_DEPTH=10, MAX_ENCODED_SIZE=500)


def test_from_yaml_rejects_unknown_keys(tmp_path):
    filepath = tmp_path / 'settings.yml'
    filepath.write_text('MAX_VARINT_BYTES: 20\n')
    with pytest.raises(ValidationError):
        CodecSettings.from_yaml(filepath=filepath)


def test_from_empty_yaml(tmp_path):
    filepath = tmp_path / 'empty.yml'
    filepath.write_text('')
    assert CodecSettings.from_yaml(filepath=filepath) == CodecSettings()


def test_extends(tmp_path):
    (tmp_path / 'base.yml').write_text('MAX_NESTING_DEPTH: 10\nMAX_ENCODED_SIZE: 500\n')
    (tmp_path / 'child.yml').write_text('extends: base.yml\nMAX_ENCODED_SIZE: 600\n')
    assert dict_from_extended_yaml(filepath=tmp_path / 'child.yml') == dict(MAX_NESTING_DEPTH=10, MAX_ENCODED_SIZE=600)
    # without following the extension
    assert dict_from_yaml(filepath=tmp_path / 'child.yml') == dict(extends='base.yml', MAX_ENCODED_SIZE=600)


def test_extends_missing_file(tmp_path):
    (tmp_path / 'child.yml').write_text('extends: missing.yml\n')
    with pytest.raises(ValueError):
        dict_from_extended_yaml(filepath=tmp_path / 'child.yml')


def test_extends_itself(tmp_path):
    (tmp_path / 'loop.yml').write_text('extends: loop.yml\n')
    with pytest.raises(ValueError):
        dict_from_extended_yaml(filepath=tmp_path / 'loop.yml')


def test_extends_recursively(tmp_path):
    (tmp_path / 'a.yml').write_text('extends: b.yml\n')
    (tmp_path / 'b.yml').write_text('extends: a.yml\n')
    with pytest.raises(ValueError):
        dict_from_extended_yaml(filepath=tmp_path / 'a.yml')


def test_yaml_must_be_a_dict(tmp_path):
    filepath = tmp_path / 'list.yml'
    filepath.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        dict_from_yaml(filepath=filepath)


def test_yaml_not_a_file(tmp_path):
    with pytest.raises(ValueError):
        dict_from_yaml(filepath=tmp_path)


def test_extends_replaces_whole_values(tmp_path):
    (tmp_path / 'base.yml').write_text('A:\n  x: 1\n  y: 2\nB: 1\n')
    (tmp_path / 'child.yml').write_text('extends: base.yml\nA:\n  x: 3\n')
    assert dict_from_extended_yaml(filepath=tmp_path / 'child.yml') == dict(A=dict(x=3), B=1)
