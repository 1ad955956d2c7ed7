import pytest


@pytest.mark.parametrize(
    ['env_value', 'expected'],
    [
        (None, '0.1.0-local'),
        ('', '0.1.0-local'),
        ('0.2.0', '0.2.0'),
        ('0.2.0-rc.3', '0.2.0-rc.3'),
        ('latest', '0.1.0-local'),
    ]
)
def test_get_version(monkeypatch: pytest.MonkeyPatch, env_value: str | None, expected: str) -> None:
    from functions_request.version import BUILD_VERSION_ENV_VAR, get_version
    if env_value is None:
        monkeypatch.delenv(BUILD_VERSION_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(BUILD_VERSION_ENV_VAR, env_value)
    assert get_version() == expected
