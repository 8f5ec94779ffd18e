"""UntypedResultSet - one read-only view over two kinds of query results.

A result either comes from a structured batch (``ResultSet``: shared column
specifications plus positional rows) or from a list of independently built
name -> value maps. Both are exposed through the same interface; only the
way rows are materialized differs.

Usage:
    result = UntypedResultSet.from_result_set(batch)
    for row in result:
        if row.has("name"):
            print(row.get_string("name"))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence

from row_result.core.exceptions import InvalidCardinalityError
from row_result.core.metadata import ResultSet, freeze_value
from row_result.core.row import Row
from row_result.core.settings import DEFAULT_SETTINGS, DecodeSettings

log = logging.getLogger(__name__)


class UntypedResultSet(ABC):
    """Immutable, restartable sequence of rows.

    Construct through :meth:`from_result_set`, :meth:`from_rows` or
    :meth:`create`. Every call to ``iter()`` starts a fresh traversal at the
    first row, so a result may be iterated any number of times, including
    concurrently.
    """

    def __init__(self, settings: DecodeSettings | None = None) -> None:
        self._settings = settings if settings is not None else DEFAULT_SETTINGS

    @classmethod
    def from_result_set(
        cls,
        result_set: ResultSet,
        settings: DecodeSettings | None = None,
    ) -> UntypedResultSet:
        """Wrap a structured batch. Rows carry the batch's column specs."""
        log.debug("Wrapping structured batch of %d rows", result_set.size())
        return _FromResultSet(result_set, settings)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Mapping[str, bytes | None]],
        settings: DecodeSettings | None = None,
    ) -> UntypedResultSet:
        """Wrap independent name -> value maps. Rows carry no column specs."""
        log.debug("Wrapping %d independent row maps", len(rows))
        return _FromResultList(rows, settings)

    @classmethod
    def create(
        cls,
        source: ResultSet | Sequence[Mapping[str, bytes | None]],
        settings: DecodeSettings | None = None,
    ) -> UntypedResultSet:
        """Pick the variant matching the shape of ``source``."""
        if isinstance(source, ResultSet):
            return cls.from_result_set(source, settings)
        return cls.from_rows(source, settings)

    @abstractmethod
    def size(self) -> int:
        """Number of rows."""

    @abstractmethod
    def _row_at(self, index: int) -> Row:
        """Materialize the row at ``index``."""

    def is_empty(self) -> bool:
        return self.size() == 0

    def one(self) -> Row:
        """Return the only row.

        Raises:
            InvalidCardinalityError: If the result does not hold exactly one row.
        """
        count = self.size()
        if count != 1:
            raise InvalidCardinalityError(count)
        return self._row_at(0)

    def rows(self) -> Iterator[Row]:
        """Lazily yield rows in order, starting from the first."""
        for index in range(self.size()):
            yield self._row_at(index)

    def __iter__(self) -> Iterator[Row]:
        return self.rows()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"


class _FromResultSet(UntypedResultSet):
    """Rows from a structured batch, sharing one tuple of column specs."""

    def __init__(self, result_set: ResultSet, settings: DecodeSettings | None = None) -> None:
        super().__init__(settings)
        self._result_set = result_set

    def size(self) -> int:
        return self._result_set.size()

    def _row_at(self, index: int) -> Row:
        return Row.from_columns(
            self._result_set.metadata.names,
            self._result_set.rows[index],
            settings=self._settings,
        )


class _FromResultList(UntypedResultSet):
    """Rows from independent maps; no column specs are attached."""

    def __init__(
        self,
        rows: Sequence[Mapping[str, bytes | None]],
        settings: DecodeSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self._rows = tuple(
            {name: freeze_value(value) for name, value in row.items()} for row in rows
        )

    def size(self) -> int:
        return len(self._rows)

    def _row_at(self, index: int) -> Row:
        return Row.from_mapping(self._rows[index], settings=self._settings)
