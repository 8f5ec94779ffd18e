"""Unit tests for DecodeSettings and result metadata."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from row_result.core.exceptions import ColumnMismatchError
from row_result.core.metadata import ColumnSpecification, ResultMetadata, ResultSet
from row_result.core.settings import DEFAULT_SETTINGS, DecodeSettings
from row_result.marshal import INT32


class TestDecodeSettings:
    def test_defaults(self) -> None:
        assert DEFAULT_SETTINGS.protocol_version == 4
        assert DEFAULT_SETTINGS.allow_trailing_bytes is False
        assert not DEFAULT_SETTINGS.uses_short_framing

    def test_v2_uses_short_framing(self) -> None:
        assert DecodeSettings(protocol_version=2).uses_short_framing

    @pytest.mark.parametrize("version", [1, 6])
    def test_protocol_version_bounds(self, version: int) -> None:
        with pytest.raises(ValidationError):
            DecodeSettings(protocol_version=version)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.protocol_version = 3  # type: ignore[misc]

    def test_coerces_from_strings(self) -> None:
        settings = DecodeSettings.model_validate({"protocol_version": "3"})
        assert settings.protocol_version == 3


class TestResultSet:
    def test_row_length_must_match_columns(self) -> None:
        metadata = ResultMetadata([ColumnSpecification("ks", "t", "a", INT32)])
        with pytest.raises(ColumnMismatchError, match="2 values but 1 columns"):
            ResultSet(metadata, [[b"\x00\x00\x00\x01", None]])

    def test_rows_are_frozen(self) -> None:
        metadata = ResultMetadata([ColumnSpecification("ks", "t", "a", INT32)])
        source = [[None]]
        batch = ResultSet(metadata, source)
        source[0][0] = b"x"
        assert batch.rows == ((None,),)
        assert batch.size() == len(batch) == 1

    def test_row_buffers_are_detached(self) -> None:
        metadata = ResultMetadata([ColumnSpecification("ks", "t", "a", INT32)])
        buffer = bytearray(b"\x00\x00\x00\x01")
        batch = ResultSet(metadata, [[buffer]])
        buffer[3] = 9
        assert batch.rows == ((b"\x00\x00\x00\x01",),)

    def test_metadata_column_count(self) -> None:
        specs = [
            ColumnSpecification("ks", "t", "a", INT32),
            ColumnSpecification("ks", "t", "b", INT32),
        ]
        metadata = ResultMetadata(specs)
        assert metadata.column_count == 2
        assert isinstance(metadata.names, tuple)
        assert str(specs[0]) == "a"
