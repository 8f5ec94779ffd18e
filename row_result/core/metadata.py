"""Column metadata and structured result batches.

Frozen dataclasses describing what a query pipeline hands back: one shared
list of column specifications and positional value rows aligned with it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from row_result.core.exceptions import ColumnMismatchError
from row_result.marshal.protocol import AbstractType


def freeze_value(value: bytes | bytearray | memoryview | None) -> bytes | None:
    """Detach an encoded value from any mutable buffer it arrived in."""
    return None if value is None else bytes(value)


@dataclass(frozen=True)
class ColumnSpecification:
    """Identity and decode type of one result column."""

    ks_name: str
    cf_name: str
    name: str
    type: AbstractType[Any]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ResultMetadata:
    """Ordered column specifications shared by every row of a batch."""

    names: Sequence[ColumnSpecification] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))

    @property
    def column_count(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class ResultSet:
    """A structured batch: shared metadata plus positional value rows.

    Every row must carry exactly one encoded value (or None) per column.

    Raises:
        ColumnMismatchError: If a row's length differs from the column count.
    """

    metadata: ResultMetadata
    rows: Sequence[Sequence[bytes | None]] = ()

    def __post_init__(self) -> None:
        rows = tuple(tuple(freeze_value(value) for value in row) for row in self.rows)
        expected = self.metadata.column_count
        for row in rows:
            if len(row) != expected:
                raise ColumnMismatchError(expected, len(row))
        object.__setattr__(self, "rows", rows)

    def size(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)
