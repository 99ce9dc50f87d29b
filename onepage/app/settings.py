from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_requests_debug

ENV_PREFIX = "ONEPAGE_"


@dataclass(frozen=True)
class CheckoutSettings:
    """Typed runtime settings for the checkout services."""

    pricing_base_url: str = ""
    pricing_api_key: str = ""
    request_timeout_s: int = 5
    retries: int = 1
    expiration_year_count: int = 10
    default_locale: str = ""
    api_key: str = ""
    debug_logging: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CheckoutSettings":
        """Read ``ONEPAGE_<FIELD>`` variables on top of the defaults."""
        env = os.environ if environ is None else environ
        payload: Dict[str, Any] = {}
        for item in fields(cls):
            value = env.get(f"{ENV_PREFIX}{item.name.upper()}")
            if value is not None:
                payload[item.name] = value
        settings = cls().apply_dict(payload)
        if "debug_logging" not in payload and env_requests_debug(env):
            settings = replace(settings, debug_logging=True)
        return settings

    def apply_dict(self, payload: Mapping[str, Any]) -> "CheckoutSettings":
        """Return a copy with the flat ``payload`` applied after type coercion."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        known = {item.name for item in fields(self)}
        unknown = set(payload.keys()) - known
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {key: self._coerce_value(key, raw) for key, raw in payload.items()}
        return replace(self, **updates) if updates else self

    def to_dict(self) -> dict:
        return asdict(self)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_value(self, key: str, raw: Any) -> Any:
        if key in {"request_timeout_s", "expiration_year_count"}:
            value = _coerce_int(key, raw)
            if value <= 0:
                raise ValueError(f"{key} must be positive.")
            return value
        if key == "retries":
            value = _coerce_int(key, raw)
            if value < 0:
                raise ValueError("retries must be non-negative.")
            return value
        if key == "debug_logging":
            return _coerce_bool(raw)
        if key == "pricing_base_url":
            return _coerce_str(raw).rstrip("/")
        return _coerce_str(raw)


def _coerce_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    raise ValueError(f"{name} must be an integer.")


__all__ = ["CheckoutSettings", "ENV_PREFIX"]
