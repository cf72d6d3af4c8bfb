"""Registry of named TLS configurations for use when opening connections."""

from __future__ import annotations

import threading
from typing import Any

_lock = threading.RLock()
_registry: dict[str, Any] = {}


def register_tls_config(key: str, config: Any) -> None:
    """Register a TLS configuration under key, replacing any earlier one."""
    with _lock:
        _registry[key] = config


def deregister_tls_config(key: str) -> None:
    """Remove the TLS configuration registered under key, if any."""
    with _lock:
        _registry.pop(key, None)


def get_tls_config(key: str) -> Any | None:
    """Return the TLS configuration registered under key, or None."""
    with _lock:
        return _registry.get(key)