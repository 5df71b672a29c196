from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.carprovider.com"


@dataclass(frozen=True, slots=True)
class CarApiConfig:
    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    token: str | None = None
    secret: str | None = None
    timeout_seconds: float = 10.0
    cache_ttl_seconds: float = 15 * 60
    cache_max_entries: int = 256

    @property
    def has_credentials(self) -> bool:
        return bool(self.token or self.api_key)


def car_api_config() -> CarApiConfig:
    """Read upstream catalog settings from the environment. Credentials are optional."""
    return CarApiConfig(
        base_url=os.getenv("CAR_API_BASE_URL") or DEFAULT_BASE_URL,
        api_key=os.getenv("CAR_API_KEY") or None,
        token=os.getenv("CAR_API_TOKEN") or None,
        secret=os.getenv("CAR_API_SECRET") or None,
        timeout_seconds=float(os.getenv("CAR_API_TIMEOUT_SECONDS", "10")),
        cache_ttl_seconds=float(os.getenv("CAR_API_CACHE_TTL_SECONDS", str(15 * 60))),
        cache_max_entries=int(os.getenv("CAR_API_CACHE_MAX_ENTRIES", "256")),
    )
