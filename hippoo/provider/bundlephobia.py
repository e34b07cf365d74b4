"""Size API client for bundlephobia.com.

Transport failures (connection errors, timeouts) are retried with tenacity;
HTTP error statuses are not.  Every outcome is returned as a ``Result`` so
callers never see a ``requests`` exception.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests import Response
from result import Err, Ok
from tenacity import before_sleep_log, retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from hippoo import __version__
from hippoo.config.schema import DEFAULT_API_URL
from hippoo.models.enums import ErrorKind
from hippoo.models.errors import FetchError, FetchResult
from hippoo.models.package import PackageMetrics

logger = logging.getLogger(__name__)

USER_AGENT = f"hippoo/{__version__} (+https://github.com/hippoo-cli/hippoo)"

_RETRYABLE = (requests.ConnectionError, requests.Timeout)


class BundlephobiaProvider:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: int = 30,
        retry_attempts: int = 3,
        retry_wait: int = 1,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self._get = retry(
            reraise=True,
            stop=stop_after_attempt(retry_attempts),
            wait=wait_fixed(retry_wait),
            retry=retry_if_exception_type(_RETRYABLE),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )(self._http_get)

    def _http_get(self, name: str) -> Response:
        logger.debug("GET %s package=%s", self.api_url, name)
        return requests.get(
            self.api_url,
            params={"package": name},
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=self.timeout,
        )

    def fetch(self, name: str) -> FetchResult:
        try:
            response = self._get(name)
        except requests.RequestException as exc:
            return Err(FetchError(ErrorKind.PROVIDER_FAILURE, name, str(exc)))

        if response.status_code == 404:
            message = _error_message(response) or f"Package {name} was not found."
            return Err(FetchError(ErrorKind.NOT_FOUND, name, message))
        if response.status_code != 200:
            message = _error_message(response) or f"Unexpected status code {response.status_code}"
            return Err(FetchError(ErrorKind.PROVIDER_FAILURE, name, message))

        try:
            payload = response.json()
            if not isinstance(payload, dict):
                raise TypeError("response body is not a JSON object")
            metrics = PackageMetrics.from_payload(name, payload)
        except (ValueError, KeyError, TypeError) as exc:
            return Err(FetchError(ErrorKind.PROVIDER_FAILURE, name, f"Malformed size response: {exc}"))

        logger.debug("%s: size=%d gzip=%d deps=%d", name, metrics.size, metrics.gzip, metrics.dependency_count)
        return Ok(metrics)


def _error_message(response: Response) -> str | None:
    """Extract ``error.message`` from an API error body, if there is one."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return None
