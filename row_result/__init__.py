"""RowResult - uniform, typed access to untyped query results."""

from __future__ import annotations

from row_result.core.exceptions import (
    ColumnMappingError,
    ColumnMismatchError,
    DecodeError,
    InvalidCardinalityError,
    MappingError,
    RowResultError,
)
from row_result.core.metadata import ColumnSpecification, ResultMetadata, ResultSet
from row_result.core.result import UntypedResultSet
from row_result.core.row import Row
from row_result.core.settings import DEFAULT_SETTINGS, DecodeSettings
from row_result.mapping.model import ModelMapper

__all__ = [
    # Results
    "UntypedResultSet",
    "Row",
    # Metadata
    "ColumnSpecification",
    "ResultMetadata",
    "ResultSet",
    # Settings
    "DecodeSettings",
    "DEFAULT_SETTINGS",
    # Mapping
    "ModelMapper",
    # Exceptions
    "RowResultError",
    "InvalidCardinalityError",
    "ColumnMismatchError",
    "DecodeError",
    "MappingError",
    "ColumnMappingError",
]
