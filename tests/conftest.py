from __future__ import annotations

import pytest

ENVIRONMENT_SETTINGS = (
    "DATABASE_URL",
    "CAR_CATALOG_SOURCE",
    "CAR_API_BASE_URL",
    "CAR_API_KEY",
    "CAR_API_TOKEN",
    "CAR_API_SECRET",
    "CAR_API_TIMEOUT_SECONDS",
    "CAR_API_CACHE_TTL_SECONDS",
    "CAR_API_CACHE_MAX_ENTRIES",
    "SESSION_SECRET",
    "SESSION_MAX_AGE_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests start from an unconfigured process: no database, no upstream credentials."""
    for name in ENVIRONMENT_SETTINGS:
        monkeypatch.delenv(name, raising=False)
