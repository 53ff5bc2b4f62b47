"""Errors attached to a request context, with type flags and JSON output."""

from __future__ import annotations

import dataclasses
import enum
import json
from collections.abc import Mapping
from typing import Any


class ErrorType(enum.IntFlag):
    """Bit flags classifying an :class:`Error`."""

    PRIVATE = 1 << 0
    PUBLIC = 1 << 1
    NU = 2
    RENDER = 1 << 62
    BIND = 1 << 63
    ANY = (1 << 64) - 1


def _go_format(value: Any) -> str:
    """Render a value the way a ``%v`` verb would."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        items = sorted(value.items(), key=lambda item: str(item[0]))
        return "map[" + " ".join(f"{_go_format(k)}:{_go_format(v)}" for k, v in items) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_go_format(v) for v in value) + "]"
    return str(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Error):
        return obj.to_json()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def _marshal(value: Any) -> str:
    text = json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_json_default,
    )
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


class Error(Exception):
    """An error recorded on a context, carrying a type and optional metadata."""

    def __init__(self, err: BaseException, error_type: int = ErrorType.PRIVATE, meta: Any = None):
        super().__init__(err)
        self.err = err
        self.type = error_type
        self.meta = meta
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)

    def set_type(self, flags: int) -> Error:
        """Set the type flags and return this error."""
        self.type = flags
        return self

    def set_meta(self, data: Any) -> Error:
        """Set the metadata and return this error."""
        self.meta = data
        return self

    def to_json(self) -> Any:
        """Build a JSON-ready value describing this error."""
        data: dict[str, Any] = {}
        meta = self.meta
        if meta is not None:
            if dataclasses.is_dataclass(meta) and not isinstance(meta, type):
                return meta
            if isinstance(meta, Mapping):
                for key, value in meta.items():
                    data[str(key)] = value
            else:
                data["meta"] = meta
        data.setdefault("error", str(self))
        return data

    def is_type(self, flags: int) -> bool:
        """Return True when any of ``flags`` is set on this error."""
        return (int(self.type) & int(flags)) > 0


class ErrorList(list):
    """A list of :class:`Error` objects collected during a request."""

    def by_type(self, typ: int) -> ErrorList:
        """Return the errors whose type matches ``typ``."""
        if not self:
            return ErrorList()
        if int(typ) == int(ErrorType.ANY):
            return self
        return ErrorList(msg for msg in self if msg.is_type(typ))

    def last(self) -> Error | None:
        """Return the last error, or None when the list is empty."""
        return self[-1] if self else None

    def messages(self) -> list[str]:
        """Return the message of every error, in order."""
        return [str(msg) for msg in self]

    def to_json(self) -> Any:
        """Build a JSON-ready value: None, one object, or a list of objects."""
        if not self:
            return None
        if len(self) == 1:
            return self[0].to_json()
        return [msg.to_json() for msg in self]

    def dumps(self) -> str:
        """Serialise the errors to compact JSON."""
        return _marshal(self.to_json())

    def __str__(self) -> str:
        lines = []
        for number, msg in enumerate(self, start=1):
            lines.append(f"Error #{number:02d}: {msg.err}\n")
            if msg.meta is not None:
                lines.append(f"     Meta: {_go_format(msg.meta)}\n")
        return "".join(lines)