"""Parametrized collection codecs.

A collection is framed as an element count followed by one
(length, payload) pair per element; maps alternate key and value pairs.
Counts and lengths are signed 32-bit ints, or unsigned 16-bit ints under
protocol version 2. A negative length marks a null element.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any

from row_result.core.exceptions import DecodeError
from row_result.core.settings import DEFAULT_SETTINGS, DecodeSettings
from row_result.marshal.protocol import AbstractType

_INT = struct.Struct(">i")
_SHORT = struct.Struct(">H")


class _FrameReader:
    """Cursor over the framed payload of a single collection value."""

    def __init__(self, type_name: str, data: bytes, settings: DecodeSettings) -> None:
        self._type_name = type_name
        self._data = data
        self._settings = settings
        self._header = _SHORT if settings.uses_short_framing else _INT
        self._offset = 0

    def _read_header(self, what: str) -> int:
        end = self._offset + self._header.size
        if end > len(self._data):
            raise DecodeError(
                self._type_name, f"truncated {what} at offset {self._offset}"
            )
        (value,) = self._header.unpack_from(self._data, self._offset)
        self._offset = end
        return int(value)

    def read_count(self) -> int:
        count = self._read_header("element count")
        if count < 0:
            raise DecodeError(self._type_name, f"negative element count {count}")
        return count

    def read_value(self) -> bytes | None:
        length = self._read_header("element length")
        if length < 0:
            return None
        end = self._offset + length
        if end > len(self._data):
            raise DecodeError(
                self._type_name,
                f"element of {length} bytes overruns value at offset {self._offset}",
            )
        value = self._data[self._offset:end]
        self._offset = end
        return value

    def finish(self) -> None:
        remaining = len(self._data) - self._offset
        if remaining and not self._settings.allow_trailing_bytes:
            raise DecodeError(
                self._type_name, f"{remaining} unexpected trailing bytes"
            )


def _open(type_name: str, raw: bytes | None, settings: DecodeSettings) -> _FrameReader | None:
    """Return a reader, or None for an empty payload."""
    if raw is None:
        raise DecodeError(type_name, "value is null")
    data = bytes(raw)
    if not data:
        return None
    return _FrameReader(type_name, data, settings)


@dataclass(frozen=True)
class ListType:
    """Ordered sequence of elements decoded by ``elements``."""

    elements: AbstractType[Any]
    settings: DecodeSettings = field(default=DEFAULT_SETTINGS, kw_only=True)

    @property
    def name(self) -> str:
        return f"list<{self.elements.name}>"

    def compose(self, raw: bytes | None) -> list[Any]:
        reader = _open(self.name, raw, self.settings)
        if reader is None:
            return []
        result = [self.elements.compose(reader.read_value()) for _ in range(reader.read_count())]
        reader.finish()
        return result


@dataclass(frozen=True)
class SetType:
    """Unordered set of elements decoded by ``elements``."""

    elements: AbstractType[Any]
    settings: DecodeSettings = field(default=DEFAULT_SETTINGS, kw_only=True)

    @property
    def name(self) -> str:
        return f"set<{self.elements.name}>"

    def compose(self, raw: bytes | None) -> set[Any]:
        reader = _open(self.name, raw, self.settings)
        if reader is None:
            return set()
        result: set[Any] = set()
        for _ in range(reader.read_count()):
            element = self.elements.compose(reader.read_value())
            try:
                result.add(element)
            except TypeError as e:
                raise DecodeError(self.name, f"unhashable element {element!r}") from e
        reader.finish()
        return result


@dataclass(frozen=True)
class MapType:
    """Key/value mapping decoded by ``keys`` and ``values``."""

    keys: AbstractType[Any]
    values: AbstractType[Any]
    settings: DecodeSettings = field(default=DEFAULT_SETTINGS, kw_only=True)

    @property
    def name(self) -> str:
        return f"map<{self.keys.name}, {self.values.name}>"

    def compose(self, raw: bytes | None) -> dict[Any, Any]:
        reader = _open(self.name, raw, self.settings)
        if reader is None:
            return {}
        result: dict[Any, Any] = {}
        for _ in range(reader.read_count()):
            key = self.keys.compose(reader.read_value())
            value = self.values.compose(reader.read_value())
            try:
                result[key] = value
            except TypeError as e:
                raise DecodeError(self.name, f"unhashable key {key!r}") from e
        reader.finish()
        return result
