"""Mapper protocol.

All row mappers implement this interface. map_many accepts any iterable of
rows, so an UntypedResultSet can be passed directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

from row_result.core.row import Row

T = TypeVar("T")


class RowMapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, row: Row) -> T:
        """Map a single row to a target object."""
        ...

    def map_many(self, rows: Iterable[Row]) -> list[T]:
        """Map multiple rows to a list of target objects."""
        ...
