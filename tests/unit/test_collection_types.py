"""Unit tests for collection codecs."""

from __future__ import annotations

import struct

import pytest

from row_result.core.exceptions import DecodeError
from row_result.core.settings import DecodeSettings
from row_result.marshal import BYTES, INT32, UTF8, ListType, MapType, SetType


def int32(value: int) -> bytes:
    return struct.pack(">i", value)


class TestListType:
    def test_preserves_order_and_duplicates(self, frame) -> None:
        assert ListType(INT32).compose(frame([int32(3), int32(1), int32(3)])) == [3, 1, 3]

    def test_empty_payload_is_empty_list(self) -> None:
        assert ListType(INT32).compose(b"") == []

    def test_null_rejected(self) -> None:
        with pytest.raises(DecodeError, match="list<int>"):
            ListType(INT32).compose(None)

    def test_null_element_goes_to_element_codec(self, frame) -> None:
        assert ListType(BYTES).compose(frame([b"a", None])) == [b"a", None]
        with pytest.raises(DecodeError, match="value is null"):
            ListType(INT32).compose(frame([None]))

    def test_nested(self, frame) -> None:
        inner = frame([int32(1), int32(2)])
        outer = frame([inner, frame([])])
        assert ListType(ListType(INT32)).compose(outer) == [[1, 2], []]

    def test_element_errors_propagate(self, frame) -> None:
        with pytest.raises(DecodeError, match="expected 4 bytes"):
            ListType(INT32).compose(frame([b"\x01"]))


class TestSetType:
    def test_deduplicates(self, frame) -> None:
        assert SetType(UTF8).compose(frame([b"x", b"y", b"x"])) == {"x", "y"}

    def test_unhashable_element_raises(self, frame) -> None:
        payload = frame([frame([int32(1)])])
        with pytest.raises(DecodeError, match="unhashable"):
            SetType(ListType(INT32)).compose(payload)


class TestMapType:
    def test_decodes_pairs(self, frame) -> None:
        payload = frame([int32(1), b"one", int32(2), b"two"], count=2)
        assert MapType(INT32, UTF8).compose(payload) == {1: "one", 2: "two"}

    def test_empty(self, frame) -> None:
        assert MapType(INT32, UTF8).compose(frame([])) == {}

    def test_name(self) -> None:
        assert MapType(INT32, UTF8).name == "map<int, text>"


class TestFraming:
    def test_truncated_count(self) -> None:
        with pytest.raises(DecodeError, match="truncated element count"):
            ListType(INT32).compose(b"\x00\x00")

    def test_element_overrun(self) -> None:
        payload = int32(1) + int32(8) + b"\x00\x00"
        with pytest.raises(DecodeError, match="overruns"):
            ListType(BYTES).compose(payload)

    def test_negative_count(self) -> None:
        with pytest.raises(DecodeError, match="negative element count"):
            ListType(INT32).compose(int32(-1))

    def test_trailing_bytes_rejected_by_default(self, frame) -> None:
        with pytest.raises(DecodeError, match="2 unexpected trailing bytes"):
            ListType(INT32).compose(frame([int32(1)]) + b"\x00\x00")

    def test_trailing_bytes_allowed_by_settings(self, frame) -> None:
        settings = DecodeSettings(allow_trailing_bytes=True)
        codec = ListType(INT32, settings=settings)
        assert codec.compose(frame([int32(1)]) + b"\x00\x00") == [1]

    def test_short_framing_for_protocol_v2(self, frame) -> None:
        settings = DecodeSettings(protocol_version=2)
        payload = frame([b"ab", b"c"], short=True)
        assert ListType(UTF8, settings=settings).compose(payload) == ["ab", "c"]

    def test_short_framing_helper_rejects_null_elements(self, frame) -> None:
        with pytest.raises(ValueError, match="no null element marker"):
            frame([b"a", None], short=True)

    def test_short_framing_misread_as_int_fails(self, frame) -> None:
        payload = frame([b"ab"], short=True)
        with pytest.raises(DecodeError):
            ListType(UTF8).compose(payload)
