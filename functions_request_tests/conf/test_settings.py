from pathlib import Path

import pytest
from pydantic import ValidationError

from functions_request.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH
from functions_request.conf.get_settings import get_global_settings, get_settings_source, load_yaml_settings
from functions_request.conf.settings import FunctionsSettings
from functions_request.types import MapFraming

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_default_settings() -> None:
    assert load_yaml_settings(DEFAULT_SETTINGS_FILEPATH) == FunctionsSettings()


def test_unittests_settings() -> None:
    settings = load_yaml_settings(UNITTESTS_SETTINGS_FILEPATH)
    assert settings == FunctionsSettings(ENVIRONMENT_NAME='unittests')


def test_global_settings() -> None:
    settings = get_global_settings()
    assert settings is get_global_settings()
    assert settings.ENVIRONMENT_NAME == 'unittests'
    assert get_settings_source() == UNITTESTS_SETTINGS_FILEPATH


def test_valid_settings_from_yaml() -> None:
    expected = FunctionsSettings(
        ENVIRONMENT_NAME='testing',
        BUFFER_INITIAL_CAPACITY=64,
        MAX_REQUEST_BYTES=4096,
        REQUEST_MAP_FRAMING=MapFraming.NONE,
        SENDERS_FILE_HEADER='functions-senders',
    )
    assert load_yaml_settings(str(FIXTURES_DIR / 'valid_settings_fixture.yml')) == expected


def test_extended_settings_from_yaml() -> None:
    settings = load_yaml_settings(str(FIXTURES_DIR / 'extends_fixture.yml'))
    assert settings.ENVIRONMENT_NAME == 'extended'
    assert settings.MAX_REQUEST_BYTES is None
    assert settings.BUFFER_INITIAL_CAPACITY == 64
    assert settings.REQUEST_MAP_FRAMING is MapFraming.NONE


@pytest.mark.parametrize(
    ['filepath', 'field'],
    [
        ('invalid_capacity_fixture.yml', 'BUFFER_INITIAL_CAPACITY'),
        ('invalid_framing_fixture.yml', 'REQUEST_MAP_FRAMING'),
        ('blank_header_fixture.yml', 'SENDERS_FILE_HEADER'),
        ('unknown_key_fixture.yml', 'MAX_BYTES'),
    ]
)
def test_invalid_settings_from_yaml(filepath: str, field: str) -> None:
    with pytest.raises(ValidationError) as e:
        load_yaml_settings(str(FIXTURES_DIR / filepath))
    assert field in str(e.value)


def test_missing_file() -> None:
    with pytest.raises(ValueError):
        load_yaml_settings(str(FIXTURES_DIR / 'missing.yml'))


def test_settings_are_frozen() -> None:
    settings = FunctionsSettings()
    with pytest.raises(ValidationError):
        settings.MAX_REQUEST_BYTES = 10  # type: ignore[misc]


def test_recursive_extends() -> None:
    with pytest.raises(ValueError, match='cannot be recursive'):
        load_yaml_settings(str(FIXTURES_DIR / 'recursive_a_fixture.yml'))


def test_merge_settings_dicts() -> None:
    from functions_request.utils.yaml import merge_settings_dicts
    base = {'A': 1, 'B': {'C': [1, 2]}}
    merged = merge_settings_dicts(base, {'B': {'D': 3}})
    assert merged == {'A': 1, 'B': {'C': [1, 2], 'D': 3}}
    merged['B']['C'].append(3)
    assert base == {'A': 1, 'B': {'C': [1, 2]}}
