"""Row - an immutable column name to encoded value mapping with typed getters.

Null versus missing:
    ``has()`` and the scalar getters cannot tell a column stored as null
    from a column that is absent; the scalar getters hand either one to the
    codec, which rejects it with DecodeError (except ``get_bytes``, which
    returns the raw value verbatim). The collection getters go the other
    way and return an empty collection for both. Guard scalar reads with
    ``has()``.
"""

from __future__ import annotations

import ipaddress
import uuid
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from types import MappingProxyType
from typing import TypeVar

from row_result.core.exceptions import ColumnMismatchError
from row_result.core.metadata import ColumnSpecification, freeze_value
from row_result.core.settings import DEFAULT_SETTINGS, DecodeSettings
from row_result.marshal import scalars
from row_result.marshal.collection_types import ListType, MapType, SetType
from row_result.marshal.protocol import AbstractType

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class Row:
    """One decodable record.

    Build rows with :meth:`from_columns` or :meth:`from_mapping`; result sets
    do this for you while iterating.
    """

    def __init__(
        self,
        data: Mapping[str, bytes | None],
        columns: Sequence[ColumnSpecification] = (),
        *,
        settings: DecodeSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._data: Mapping[str, bytes | None] = MappingProxyType(
            {name: freeze_value(value) for name, value in data.items()}
        )
        self._columns: tuple[ColumnSpecification, ...] = tuple(columns)
        self._settings = settings

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[ColumnSpecification],
        values: Sequence[bytes | None],
        *,
        settings: DecodeSettings = DEFAULT_SETTINGS,
    ) -> Row:
        """Zip column specifications with positional values.

        Raises:
            ColumnMismatchError: If the two sequences differ in length.
        """
        if len(columns) != len(values):
            raise ColumnMismatchError(len(columns), len(values))
        data = {spec.name: value for spec, value in zip(columns, values)}
        return cls(data, columns, settings=settings)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, bytes | None],
        *,
        settings: DecodeSettings = DEFAULT_SETTINGS,
    ) -> Row:
        """Copy a prebuilt name -> value mapping. The row has no column specs."""
        return cls(data, settings=settings)

    def has(self, column: str) -> bool:
        """True if the column is present and not null."""
        return self._data.get(column) is not None

    def __contains__(self, column: object) -> bool:
        return isinstance(column, str) and self.has(column)

    def get(self, column: str, codec: AbstractType[T]) -> T:
        """Decode a column with any codec. A missing column reaches the codec as None."""
        return codec.compose(self._data.get(column))

    # --- Scalars ---
    # Fixed-width types decode an empty payload to None.

    def get_string(self, column: str) -> str:
        return self.get(column, scalars.UTF8)

    def get_boolean(self, column: str) -> bool | None:
        return self.get(column, scalars.BOOLEAN)

    def get_int(self, column: str) -> int | None:
        return self.get(column, scalars.INT32)

    def get_long(self, column: str) -> int | None:
        return self.get(column, scalars.LONG)

    def get_double(self, column: str) -> float | None:
        return self.get(column, scalars.DOUBLE)

    def get_bytes(self, column: str) -> bytes | None:
        """Return the raw encoded value, None included."""
        return self._data.get(column)

    def get_inet_address(
        self, column: str
    ) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
        return self.get(column, scalars.INET_ADDRESS)

    def get_uuid(self, column: str) -> uuid.UUID | None:
        return self.get(column, scalars.UUID)

    def get_timestamp(self, column: str) -> datetime | None:
        return self.get(column, scalars.TIMESTAMP)

    # --- Collections ---

    def get_set(self, column: str, element_type: AbstractType[T]) -> set[T]:
        """Decode a set column; missing or null yields an empty set."""
        raw = self._data.get(column)
        if raw is None:
            return set()
        return SetType(element_type, settings=self._settings).compose(raw)

    def get_list(self, column: str, element_type: AbstractType[T]) -> list[T]:
        """Decode a list column; missing or null yields an empty list."""
        raw = self._data.get(column)
        if raw is None:
            return []
        return ListType(element_type, settings=self._settings).compose(raw)

    def get_map(
        self,
        column: str,
        key_type: AbstractType[K],
        value_type: AbstractType[V],
    ) -> dict[K, V]:
        """Decode a map column; missing or null yields an empty dict."""
        raw = self._data.get(column)
        if raw is None:
            return {}
        return MapType(key_type, value_type, settings=self._settings).compose(raw)

    # --- Metadata ---

    def get_columns(self) -> tuple[ColumnSpecification, ...]:
        """Column specifications attached at construction (may be empty)."""
        return self._columns

    def keys(self) -> Iterable[str]:
        return self._data.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return dict(self._data) == dict(other._data) and self._columns == other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Row({dict(self._data)!r})"
