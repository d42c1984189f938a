# file: utils/config.py

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_SENDER = '"Sabor Academico" <saboracademico@gmail.com>'


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting or the credential file is unusable."""


class Settings(BaseModel):
    port: int = 3000
    database_url: Optional[str] = None
    service_account: str
    mail_user: str
    mail_password: str
    mail_from: str = DEFAULT_SENDER
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    cors_origin: str = "https://localhost"
    users_collection: str = "usuarios"
    log_level: str = "INFO"


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(f"{name} environment variable is required")
    return value


def load_settings() -> Settings:
    """
    Reads the relay settings from the environment (and a local .env file, if any).
    Raises ConfigurationError if SERVICE_ACCOUNT, MAIL or PASSWORD is missing.
    """
    load_dotenv()
    try:
        return Settings(
            port=int(os.getenv("PORT", "3000")),
            database_url=os.getenv("DATABASE_URL") or None,
            service_account=_require("SERVICE_ACCOUNT"),
            mail_user=_require("MAIL"),
            mail_password=_require("PASSWORD"),
            mail_from=os.getenv("MAIL_FROM", DEFAULT_SENDER),
            smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=int(os.getenv("SMTP_PORT", "465")),
            cors_origin=os.getenv("CORS_ORIGIN", "https://localhost"),
            users_collection=os.getenv("USERS_COLLECTION", "usuarios"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    return load_settings()
