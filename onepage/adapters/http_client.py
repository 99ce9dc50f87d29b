"""Shared HTTP transport for adapters that call remote commerce services.

A thin wrapper around ``requests.Session``: one place for the timeout, the
retry loop for transport failures and the ``X-API-Key`` header.

Call context:
    Constructed by ``onepage.adapters.pricing_rest``; use cases only see the
    ports the adapters implement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from onepage.adapters.api_errors import ApiTimeoutError

log = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (req_exc.Timeout, req_exc.ConnectionError)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds per attempt.
        retries: Extra attempts after the first one failed at transport level.
    """

    request_timeout_s: int = 5
    retries: int = 1

    @property
    def attempts(self) -> int:
        return max(self.retries, 0) + 1


class RetryingSession:
    """Requests wrapper that retries timeouts and refused connections.

    HTTP status codes are returned untouched; callers map them with
    :func:`onepage.adapters.api_errors.raise_for_status`.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def headers(self, *, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """GET ``url``; raises ApiTimeoutError once every attempt failed."""
        return self._send(
            "GET",
            url,
            self.session.get,
            params=params,
            headers=self.headers(),
            timeout=timeout or self.cfg.request_timeout_s,
        )

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """POST ``json_body`` as JSON; raises ApiTimeoutError once every attempt failed."""
        return self._send(
            "POST",
            url,
            self.session.post,
            json=json_body,
            headers=self.headers(json_body=json_body is not None),
            timeout=timeout or self.cfg.request_timeout_s,
        )

    def _send(self, method: str, url: str, call, **kwargs: Any) -> requests.Response:
        attempts = self.cfg.attempts
        for attempt in range(1, attempts + 1):
            try:
                return call(url, **kwargs)
            except _TRANSPORT_ERRORS as exc:
                log.debug("%s %s failed (attempt %d/%d): %s", method, url, attempt, attempts, exc)
        raise ApiTimeoutError(
            f"No response from {url} after {attempts} attempt(s)",
            context=f"{method} {url}",
        )


__all__ = ["HttpConfig", "RetryingSession"]
