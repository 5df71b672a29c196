"""Settings for the HTTP entrypoint, read from the environment."""

from __future__ import annotations

from enum import Enum
import logging
import os

logger = logging.getLogger(__name__)

DEV_SESSION_SECRET = "carfinder-dev-session-secret"
DEFAULT_SESSION_MAX_AGE_SECONDS = 7 * 24 * 60 * 60

SESSION_COOKIE = "carfinder_session"
SESSION_USER_KEY = "user_id"
SESSION_NONCE_KEY = "session_nonce"


class CatalogSource(str, Enum):
    UPSTREAM = "upstream"
    DATABASE = "database"
    MEMORY = "memory"


def session_secret() -> str:
    secret = os.getenv("SESSION_SECRET")

    if not secret:
        logger.warning("SESSION_SECRET is not set, using the development secret")
        return DEV_SESSION_SECRET

    return secret


def session_max_age_seconds() -> int:
    return int(os.getenv("SESSION_MAX_AGE_SECONDS", str(DEFAULT_SESSION_MAX_AGE_SECONDS)))


def catalog_source() -> CatalogSource:
    """
    Where car data comes from.

    Raises:
        RuntimeError: If CAR_CATALOG_SOURCE holds an unknown value
    """
    value = os.getenv("CAR_CATALOG_SOURCE", CatalogSource.UPSTREAM.value).strip().lower()

    try:
        return CatalogSource(value)
    except ValueError:
        allowed = ", ".join(source.value for source in CatalogSource)
        raise RuntimeError(f"CAR_CATALOG_SOURCE must be one of: {allowed}") from None
