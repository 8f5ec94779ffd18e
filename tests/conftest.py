"""Shared test fixtures.

The package only decodes, so encoded payloads are built here with struct.
"""

from __future__ import annotations

import struct

import pytest

from row_result.core.metadata import ColumnSpecification, ResultMetadata, ResultSet
from row_result.marshal import INT32, UTF8


def _int32(value: int) -> bytes:
    return struct.pack(">i", value)


def _text(value: str) -> bytes:
    return value.encode("utf-8")


@pytest.fixture
def frame():
    """Helper to frame collection elements.

    Usage:
        frame([b"a", b"bc"])                     # int32 framing
        frame([b"a"], short=True)                # protocol v2 framing
        frame([b"k", b"v"], count=1)             # map with one entry
    """

    def _frame(
        elements: list[bytes | None],
        *,
        count: int | None = None,
        short: bool = False,
    ) -> bytes:
        header = ">H" if short else ">i"
        out = struct.pack(header, len(elements) if count is None else count)
        for element in elements:
            if element is None:
                if short:
                    raise ValueError("protocol v2 framing has no null element marker")
                out += struct.pack(">i", -1)
            else:
                out += struct.pack(header, len(element)) + element
        return out

    return _frame


@pytest.fixture
def user_columns() -> list[ColumnSpecification]:
    """Two columns: an int id and a text name."""
    return [
        ColumnSpecification("ks", "users", "id", INT32),
        ColumnSpecification("ks", "users", "name", UTF8),
    ]


@pytest.fixture
def user_batch(user_columns: list[ColumnSpecification]) -> ResultSet:
    """Structured batch with three users; the last has a null name."""
    return ResultSet(
        ResultMetadata(user_columns),
        [
            [_int32(1), _text("Alice")],
            [_int32(2), _text("Bob")],
            [_int32(3), None],
        ],
    )
