"""Mapping layer - project decoded rows onto typed objects."""

from __future__ import annotations

from row_result.mapping.model import ModelMapper
from row_result.mapping.protocol import RowMapper

__all__ = [
    "ModelMapper",
    "RowMapper",
]
