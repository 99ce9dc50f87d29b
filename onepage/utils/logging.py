"""Root logger setup for the checkout service.

Environment overrides win over code defaults and over ``debug_logging`` in
:class:`onepage.app.settings.CheckoutSettings`:

- ``ONEPAGE_LOG_LEVEL``: level name (``DEBUG``, ``warning``) or number
- ``ONEPAGE_DEBUG_LOGGING`` / ``ONEPAGE_DEBUG``: truthy value forces DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "ONEPAGE_LOG_LEVEL"
DEBUG_ENV_VARS = ("ONEPAGE_DEBUG_LOGGING", "ONEPAGE_DEBUG")

_TRUTHY = {"1", "true", "yes", "on"}


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV_VAR)
    if explicit:
        return parse_level(explicit)
    for name in DEBUG_ENV_VARS:
        if (env.get(name) or "").strip().lower() in _TRUTHY:
            return logging.DEBUG
    return None


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True if environment variables force DEBUG logging."""
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the compact root format once and return the effective level."""
    forced = env_level()
    effective = forced if forced is not None else parse_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_debug_setting(debug_enabled: bool) -> int:
    """Switch the root level for the ``debug_logging`` setting; env still wins."""
    forced = env_level()
    if forced is not None:
        level = forced
    else:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


__all__ = [
    "apply_debug_setting",
    "configure_root",
    "env_level",
    "env_requests_debug",
    "parse_level",
]
