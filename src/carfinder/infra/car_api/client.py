"""HTTP client for the upstream third-party car catalog."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from carfinder.infra.car_api.config import CarApiConfig
from carfinder.infra.car_api.response_cache import ResponseCache

logger = logging.getLogger(__name__)


class CarApiError(Exception):
    """Upstream catalog call failed (transport, status, or body)."""


class CarApiUnavailableError(CarApiError):
    """No upstream credentials are configured; no call was attempted."""


class CarApiClient:
    """
    Thin GET-only client with response caching.

    Every successful JSON payload is cached under its fully-qualified URL.
    Concurrent misses for the same URL each hit the upstream; requests are
    not coalesced.
    """

    def __init__(
        self,
        config: CarApiConfig,
        cache: ResponseCache,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._cache = cache
        self._http = http_client or httpx.Client(timeout=config.timeout_seconds)

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    def build_url(self, endpoint: str, params: dict[str, str] | None = None) -> str:
        base = self._config.base_url.rstrip("/")
        return str(httpx.URL(f"{base}{endpoint}", params=params or {}))

    def fetch(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        """
        GET an endpoint and return its decoded JSON body.

        Raises:
            CarApiUnavailableError: If no credentials are configured
            CarApiError: On transport errors, non-2xx responses or invalid JSON
        """
        if not self._config.has_credentials:
            raise CarApiUnavailableError("Car API credentials are not configured")

        url = self.build_url(endpoint, params)

        cached = self._cache.get(url)
        if cached is not None:
            logger.debug("Using cached car API response", extra={"url": url})
            return cached

        logger.info("Fetching from car API", extra={"url": url})
        try:
            response = self._http.get(url, headers=self._headers())
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Car API request failed", extra={"url": url, "error": str(exc)})
            raise CarApiError(f"Car API request failed: {exc}") from exc
        except ValueError as exc:
            logger.warning("Car API returned invalid JSON", extra={"url": url})
            raise CarApiError("Car API returned invalid JSON") from exc

        self._cache.put(url, data)
        return data

    def close(self) -> None:
        self._http.close()

    def _headers(self) -> dict[str, str]:
        headers = {
            "X-API-Token": self._config.token or "",
            "X-API-Secret": self._config.secret or "",
            "Content-Type": "application/json",
        }
        if self._config.api_key:
            headers["X-API-Key"] = self._config.api_key
        return headers
