"""Codecs - decode encoded column values into Python values."""

from __future__ import annotations

from row_result.marshal.collection_types import ListType, MapType, SetType
from row_result.marshal.protocol import AbstractType
from row_result.marshal.scalars import (
    ASCII,
    BOOLEAN,
    BYTES,
    DOUBLE,
    INET_ADDRESS,
    INT32,
    LONG,
    TIMESTAMP,
    UTF8,
    UUID,
    AsciiType,
    BooleanType,
    BytesType,
    DoubleType,
    InetAddressType,
    Int32Type,
    LongType,
    TimestampType,
    UTF8Type,
    UUIDType,
)

__all__ = [
    "AbstractType",
    # Scalar codecs
    "AsciiType",
    "BooleanType",
    "BytesType",
    "DoubleType",
    "InetAddressType",
    "Int32Type",
    "LongType",
    "TimestampType",
    "UTF8Type",
    "UUIDType",
    # Shared instances
    "ASCII",
    "BOOLEAN",
    "BYTES",
    "DOUBLE",
    "INET_ADDRESS",
    "INT32",
    "LONG",
    "TIMESTAMP",
    "UTF8",
    "UUID",
    # Collection codecs
    "ListType",
    "MapType",
    "SetType",
]
