"""Typed failures for remote commerce service calls.

``raise_for_status`` turns a non-2xx response into :class:`ApiClientError`
(4xx) or :class:`ApiServerError` (anything else). The message carries the
first readable detail the service sent back, e.g.
``"POST http://pricing/fulfillment/estimate: no rate for zone (HTTP 422)"``.
"""

from __future__ import annotations

from typing import Any, Optional

_DETAIL_KEYS = ("detail", "message", "error", "title")
_CODE_KEYS = ("code", "error_code", "error")
_MAX_TEXT = 400


class ApiError(RuntimeError):
    """Base class for failures talking to remote commerce services."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx: the request was rejected."""


class ApiServerError(ApiError):
    """HTTP 5xx or an unexpected status from the service."""


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""


def raise_for_status(resp: Any, ctx: str) -> None:
    """Raise a typed ApiError for non-2xx responses."""
    status = int(getattr(resp, "status_code", 0) or 0)
    if 200 <= status < 300:
        return
    payload = read_error_payload(resp)
    detail = error_detail(payload)
    message = f"{ctx}: {detail} (HTTP {status})" if detail else f"{ctx}: HTTP {status}"
    error_cls = ApiClientError if 400 <= status < 500 else ApiServerError
    raise error_cls(
        message,
        status=status,
        code=error_code(payload),
        payload=payload,
        context=ctx,
    )


def read_error_payload(resp: Any) -> Any:
    """Decoded JSON body, else the start of the text body, else ``None``."""
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:_MAX_TEXT] or None


def error_code(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    for key in _CODE_KEYS:
        value = payload.get(key)
        if value is not None and not isinstance(value, (dict, list)):
            return str(value)
    return None


def error_detail(payload: Any) -> Optional[str]:
    """First non-blank string found under the usual detail keys (FastAPI, RFC 7807)."""
    if isinstance(payload, str):
        return payload.strip() or None
    if isinstance(payload, list):
        return next(filter(None, (error_detail(item) for item in payload)), None)
    if isinstance(payload, dict):
        for key in _DETAIL_KEYS:
            found = error_detail(payload.get(key))
            if found:
                return found
    return None


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "error_code",
    "error_detail",
    "raise_for_status",
    "read_error_payload",
]
