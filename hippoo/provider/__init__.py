from __future__ import annotations

from typing import Protocol

from hippoo.config.schema import AppConfig
from hippoo.models.errors import FetchResult
from hippoo.provider.batch import fetch_all
from hippoo.provider.bundlephobia import BundlephobiaProvider


class SizeProvider(Protocol):
    def fetch(self, name: str) -> FetchResult: ...


def create_provider(config: AppConfig) -> BundlephobiaProvider:
    return BundlephobiaProvider(
        api_url=config.api_url,
        timeout=config.timeout_seconds,
        retry_attempts=config.retry_attempts,
        retry_wait=config.retry_wait_seconds,
    )


__all__ = [
    "BundlephobiaProvider",
    "SizeProvider",
    "create_provider",
    "fetch_all",
]
