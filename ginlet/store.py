"""Per-request key/value storage and error collection."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from .errors import Error, ErrorList, ErrorType


def _find_error(err: BaseException) -> Error | None:
    """Return the first :class:`Error` in ``err``'s cause chain, if any."""
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        if isinstance(current, Error):
            return current
        seen.add(id(current))
        current = current.__cause__
    return None


class KeyStore:
    """Values shared between the handlers of one request, plus its errors.

    The key mapping is created lazily on the first :meth:`set`, so ``keys``
    stays ``None`` until something is stored.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.keys: dict[str, Any] | None = None
        self.errors = ErrorList()

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            if self.keys is None:
                self.keys = {}
            self.keys[key] = value

    def get(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, True)`` if ``key`` is stored, else ``(None, False)``."""
        with self._lock:
            if self.keys is not None and key in self.keys:
                return self.keys[key], True
            return None, False

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self.keys is not None and key in self.keys

    def must_get(self, key: str) -> Any:
        """Return the value for ``key``; raise KeyError if it is not stored."""
        value, exists = self.get(key)
        if not exists:
            raise KeyError(f'Key "{key}" does not exist')
        return value

    def _typed(self, key: str, kinds: type | tuple[type, ...], fallback: Any,
               exclude: tuple[type, ...] = ()) -> Any:
        value, exists = self.get(key)
        if exists and isinstance(value, kinds) and not isinstance(value, exclude):
            return value
        return fallback

    def get_string(self, key: str) -> str:
        """Return the value for ``key`` if it is a string, else ``""``."""
        return self._typed(key, str, "")

    def get_bool(self, key: str) -> bool:
        """Return the value for ``key`` if it is a bool, else ``False``."""
        return self._typed(key, bool, False)

    def get_int(self, key: str) -> int:
        """Return the value for ``key`` if it is an int (not a bool), else ``0``."""
        return self._typed(key, int, 0, exclude=(bool,))

    def get_float(self, key: str) -> float:
        """Return the value for ``key`` if it is a float, else ``0.0``."""
        return self._typed(key, float, 0.0)

    def get_string_list(self, key: str) -> list[str]:
        """Return the value for ``key`` if it is a list of strings, else ``[]``."""
        value = self._typed(key, list, None)
        if value is None or not all(isinstance(item, str) for item in value):
            return []
        return value

    def get_string_map(self, key: str) -> dict[str, Any]:
        """Return the value for ``key`` if it is a mapping with string keys, else ``{}``."""
        value = self._typed(key, Mapping, None)
        if value is None or not all(isinstance(k, str) for k in value):
            return {}
        return value

    def error(self, err: BaseException) -> Error:
        """Record ``err`` and return it as an :class:`Error`.

        An :class:`Error` found in the cause chain is recorded as is; any
        other exception is wrapped as a private error. ``None`` raises ValueError.
        """
        if err is None:
            raise ValueError("err is nil")
        parsed = _find_error(err)
        if parsed is None:
            parsed = Error(err, ErrorType.PRIVATE)
        self.errors.append(parsed)
        return parsed