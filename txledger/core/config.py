import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TXLEDGER_")

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Sets up root logging from `settings`. The package never configures
    logging itself; applications embedding the ledger call this once at
    startup, optionally overriding the configured level.
    """
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=settings.LOG_FORMAT)
