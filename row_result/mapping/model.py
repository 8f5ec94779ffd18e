"""Row-to-model mapper.

Decodes the requested columns of a Row and builds a dataclass, Pydantic
model or plain class from them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from row_result.core.exceptions import ColumnMappingError
from row_result.core.row import Row
from row_result.marshal.protocol import AbstractType

T = TypeVar("T")


def _is_pydantic_model(cls: type) -> bool:
    return isinstance(cls, type) and issubclass(cls, BaseModel)


class ModelMapper(Generic[T]):
    """Row-to-model mapper.

    Detection order:
    1. Pydantic BaseModel -> model_validate(fields)
    2. dataclass or plain class -> target_class(**fields)

    Columns that are missing or null map to None without touching their
    codec, so optional fields can be left out of a row. Decode errors from
    present columns propagate unchanged.

    Args:
        target_class: The class to construct from decoded columns.
        columns: Column name -> codec used to decode it.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        columns: Mapping[str, AbstractType[Any]],
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._columns = dict(columns)
        self._aliases = aliases or {}
        self._is_pydantic = _is_pydantic_model(target_class)

    def _decode(self, row: Row) -> dict[str, Any]:
        """Decode configured columns and apply aliases."""
        result: dict[str, Any] = {}
        for column, codec in self._columns.items():
            field_name = self._aliases.get(column, column)
            result[field_name] = row.get(column, codec) if row.has(column) else None
        return result

    def map_one(self, row: Row) -> T:
        """Map a single row to a target_class instance."""
        fields = self._decode(row)

        if self._is_pydantic:
            try:
                return self._target_class.model_validate(fields)  # type: ignore[attr-defined, no-any-return]
            except ValidationError as e:
                raise ColumnMappingError(
                    self._target_class.__name__,
                    [
                        ".".join(str(part) for part in err["loc"]) + ": " + err["msg"]
                        for err in e.errors()
                    ],
                ) from e

        try:
            return self._target_class(**fields)
        except TypeError as e:
            raise ColumnMappingError(self._target_class.__name__, [str(e)]) from e

    def map_many(self, rows: Iterable[Row]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
