"""Decode settings.

DecodeSettings is a Pydantic model for type-safe decoder configuration.
Result sets hand their settings to every row they produce, and rows hand
them to the collection codecs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DecodeSettings(BaseModel):
    """Configuration for decoding encoded column values."""

    model_config = ConfigDict(frozen=True)

    # Versions below 3 frame collections with unsigned shorts instead of ints.
    protocol_version: int = Field(default=4, ge=2, le=5)
    allow_trailing_bytes: bool = False

    @property
    def uses_short_framing(self) -> bool:
        """Whether collection counts and lengths are 16-bit."""
        return self.protocol_version < 3


DEFAULT_SETTINGS = DecodeSettings()
