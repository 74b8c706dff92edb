import pytest
from pydantic import ValidationError

from cssbuilder.config import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('CSSBUILDER_LOG_LEVEL', 'CSSBUILDER_LOG_TO_FILE', 'LOGFIRE_TOKEN'):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings(load_env=False)

    assert settings.log_level == 'INFO'
    assert settings.log_to_file is True
    assert settings.logfire_token is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv('CSSBUILDER_LOG_LEVEL', 'debug')
    monkeypatch.setenv('CSSBUILDER_LOG_TO_FILE', 'false')
    monkeypatch.setenv('LOGFIRE_TOKEN', 'secret')

    settings = get_settings(load_env=False)

    assert settings.log_level == 'DEBUG'
    assert settings.log_to_file is False
    assert settings.logfire_token == 'secret'


def test_empty_logfire_token_is_ignored(monkeypatch):
    monkeypatch.setenv('LOGFIRE_TOKEN', '')
    assert get_settings(load_env=False).logfire_token is None


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv('CSSBUILDER_LOG_LEVEL', 'LOUD')
    with pytest.raises(ValidationError):
        get_settings(load_env=False)


def test_loads_dotenv(mocker):
    load_dotenv = mocker.patch('cssbuilder.config.load_dotenv')
    get_settings()
    load_dotenv.assert_called_once_with()


def test_invalid_boolean(monkeypatch):
    monkeypatch.setenv('CSSBUILDER_LOG_TO_FILE', 'sometimes')
    with pytest.raises(ValidationError):
        get_settings(load_env=False)
