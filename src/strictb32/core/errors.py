from __future__ import annotations
from enum import Enum
from typing import Optional

class MalformedCause(str, Enum):
    TOO_SHORT = "too_short"
    REDUNDANT_SYMBOL = "redundant_symbol"
    INVALID_CHARACTER = "invalid_character"
    NONZERO_TAIL_BITS = "nonzero_tail_bits"
    INVALID_PADDING = "invalid_padding"
    # Raised by the validation layer only.
    TOO_LONG = "too_long"
    LENGTH_OUT_OF_RANGE = "length_out_of_range"

class Base32Error(ValueError):
    pass

class InvalidArgument(Base32Error, TypeError):
    """Input is absent or of the wrong type."""

class MalformedInput(Base32Error):
    """Encoded text that no canonical encoding could have produced."""

    def __init__(self, cause: MalformedCause, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.cause = cause
        self.position = position
