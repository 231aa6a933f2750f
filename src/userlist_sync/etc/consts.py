import logging
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


CONFIG_PATH = Path(__file__).resolve().parent.parent.parent.parent / 'conf'


class ServiceConfig(BaseSettings):
    """
    Configuration settings for the user list synchronisation client.
    """
    model_config = SettingsConfigDict(
        env_prefix='ULS_',
        env_file=CONFIG_PATH / '.env',
        env_file_encoding='utf-8',
    )

    application_name: str = Field(
        'userlist-sync',
        description='Name of the application, also used as the logger name'
    )
    base_url: str = Field(
        'https://dummyjson.com',
        description='Base URL of the remote user endpoint',
    )
    logging_level: str = Field(
        'INFO',
        description='Logging level for the application'
    )
    request_timeout: float | None = Field(
        None,
        description='Timeout for remote requests in seconds, '
                    'None to wait indefinitely',
    )


SERVICE_CONFIG = ServiceConfig()        # type: ignore

LOGGER = logging.getLogger(SERVICE_CONFIG.application_name)
LOGGER.setLevel(SERVICE_CONFIG.logging_level.upper())

if not LOGGER.hasHandlers():
    console_handler = logging.StreamHandler()
    console_handler.setLevel(SERVICE_CONFIG.logging_level.upper())

    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )
    console_handler.setFormatter(formatter)

    LOGGER.addHandler(console_handler)

LOGGER.debug('Service configuration loaded: %s', SERVICE_CONFIG.model_dump_json(indent=2))
