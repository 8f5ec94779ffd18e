"""RowResult exception hierarchy.

Decode failures originate in the codec layer and propagate through Row
accessors unchanged. Nothing here is retried or logged.
"""

from __future__ import annotations


class RowResultError(Exception):
    """Base exception for all RowResult errors."""


# --- Result sets ---


class InvalidCardinalityError(RowResultError):
    """Raised when one() is called on a result without exactly one row."""

    def __init__(self, row_count: int) -> None:
        self.row_count = row_count
        super().__init__(f"One row required, {row_count} found")


class ColumnMismatchError(RowResultError):
    """Raised when a value row does not line up with its column descriptors."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row has {actual} values but {expected} columns are described")


# --- Decoding ---


class DecodeError(RowResultError):
    """Raised when an encoded value is not valid for the requested type."""

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Cannot decode {type_name}: {detail}")


# --- Mapping ---


class MappingError(RowResultError):
    """Base for mapping errors."""


class ColumnMappingError(MappingError):
    """Raised when decoded row columns cannot be mapped onto a target class."""

    def __init__(self, target_class: str, details: list[str]) -> None:
        self.target_class = target_class
        self.details = details
        super().__init__(f"Cannot map to {target_class}: {details}")
