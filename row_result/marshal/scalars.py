"""Scalar codecs.

Fixed-width types are big-endian. An empty payload is the "empty value" of a
fixed-width type and decodes to None; a null payload is rejected by every
codec here except BytesType.
"""

from __future__ import annotations

import ipaddress
import struct
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar

from row_result.core.exceptions import DecodeError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _require(type_name: str, raw: bytes | None) -> bytes:
    """Reject null input and normalize buffer types to bytes."""
    if raw is None:
        raise DecodeError(type_name, "value is null")
    return bytes(raw)


@dataclass(frozen=True)
class _FixedWidthType:
    """Base for types encoded as a single struct-packed field."""

    name: ClassVar[str] = "fixed"
    _struct: ClassVar[struct.Struct]

    def compose(self, raw: bytes | None) -> Any:
        data = _require(self.name, raw)
        if not data:
            return None
        if len(data) != self._struct.size:
            raise DecodeError(
                self.name, f"expected {self._struct.size} bytes, got {len(data)}"
            )
        return self._convert(self._struct.unpack(data)[0])

    def _convert(self, value: Any) -> Any:
        return value


@dataclass(frozen=True)
class BooleanType(_FixedWidthType):
    name: ClassVar[str] = "boolean"
    _struct: ClassVar[struct.Struct] = struct.Struct(">B")

    def _convert(self, value: int) -> bool:
        return value != 0


@dataclass(frozen=True)
class Int32Type(_FixedWidthType):
    name: ClassVar[str] = "int"
    _struct: ClassVar[struct.Struct] = struct.Struct(">i")


@dataclass(frozen=True)
class LongType(_FixedWidthType):
    name: ClassVar[str] = "bigint"
    _struct: ClassVar[struct.Struct] = struct.Struct(">q")


@dataclass(frozen=True)
class DoubleType(_FixedWidthType):
    name: ClassVar[str] = "double"
    _struct: ClassVar[struct.Struct] = struct.Struct(">d")


@dataclass(frozen=True)
class TimestampType(_FixedWidthType):
    """Milliseconds since the Unix epoch, decoded as an aware UTC datetime."""

    name: ClassVar[str] = "timestamp"
    _struct: ClassVar[struct.Struct] = struct.Struct(">q")

    def _convert(self, value: int) -> datetime:
        try:
            return _EPOCH + timedelta(milliseconds=value)
        except OverflowError as e:
            raise DecodeError(self.name, f"{value} ms is out of range") from e


@dataclass(frozen=True)
class UUIDType:
    name: ClassVar[str] = "uuid"

    def compose(self, raw: bytes | None) -> uuid.UUID | None:
        data = _require(self.name, raw)
        if not data:
            return None
        if len(data) != 16:
            raise DecodeError(self.name, f"expected 16 bytes, got {len(data)}")
        return uuid.UUID(bytes=data)


@dataclass(frozen=True)
class InetAddressType:
    name: ClassVar[str] = "inet"

    def compose(self, raw: bytes | None) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
        data = _require(self.name, raw)
        if not data:
            return None
        if len(data) not in (4, 16):
            raise DecodeError(self.name, f"expected 4 or 16 bytes, got {len(data)}")
        return ipaddress.ip_address(data)


@dataclass(frozen=True)
class UTF8Type:
    name: ClassVar[str] = "text"
    _encoding: ClassVar[str] = "utf-8"

    def compose(self, raw: bytes | None) -> str:
        data = _require(self.name, raw)
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(self.name, str(e)) from e


@dataclass(frozen=True)
class AsciiType(UTF8Type):
    name: ClassVar[str] = "ascii"
    _encoding: ClassVar[str] = "ascii"


@dataclass(frozen=True)
class BytesType:
    """Raw bytes, returned verbatim. The only codec that passes null through."""

    name: ClassVar[str] = "blob"

    def compose(self, raw: bytes | None) -> bytes | None:
        if raw is None:
            return None
        return bytes(raw)


UTF8 = UTF8Type()
ASCII = AsciiType()
BOOLEAN = BooleanType()
INT32 = Int32Type()
LONG = LongType()
DOUBLE = DoubleType()
BYTES = BytesType()
INET_ADDRESS = InetAddressType()
UUID = UUIDType()
TIMESTAMP = TimestampType()
