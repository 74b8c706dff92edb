"""Runtime settings read from the environment (and a local .env file)."""

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ('ALL', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
    """Settings for the cssbuilder command line tool.

    Read from CSSBUILDER_LOG_LEVEL, CSSBUILDER_LOG_TO_FILE and LOGFIRE_TOKEN.
    Empty variables fall back to the defaults.

    Attributes:
        log_level: Level for the local log file
        log_to_file: Whether to write a log file under .cssbuilder/logs
        logfire_token: Token for sending traces to Logfire, if any

    """

    model_config = SettingsConfigDict(env_prefix='CSSBUILDER_', env_ignore_empty=True, extra='ignore')

    log_level: str = Field(default='INFO', description='Local log level')
    log_to_file: bool = Field(default=True, description='Write a local log file')
    logfire_token: str | None = Field(
        default=None, validation_alias='LOGFIRE_TOKEN', description='Logfire write token'
    )

    @field_validator('log_level')
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f'log_level must be one of {", ".join(LOG_LEVELS)}')
        return level


def get_settings(load_env: bool = True) -> Settings:
    """Build Settings from environment variables.

    Args:
        load_env: Load a .env file into the environment first. Defaults to True.

    Returns:
        Populated Settings.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value

    """
    if load_env:
        load_dotenv()
    return Settings()
