"""Codec protocol.

Every column type is decoded by an object implementing this interface.
Rows call compose() with the stored encoded value and never keep the codec
around between calls.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class AbstractType(Protocol[T_co]):
    """Stateless decoder from an encoded value to a typed value."""

    @property
    def name(self) -> str:
        """Type name used in error messages."""
        ...

    def compose(self, raw: bytes | None) -> T_co:
        """Decode an encoded value (or None) into a typed value."""
        ...
