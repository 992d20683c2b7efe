from __future__ import annotations

# Shared error types for the codec.


class CodecError(ValueError):
    """Base exception for known codec errors."""


class NullInputError(CodecError):
    """Raised when no source bytes were supplied."""


class InvalidRangeError(CodecError):
    """Raised when an offset/length pair does not fit inside the source."""

    def __init__(self, offset: int, length: int, size: int) -> None:
        self.offset = offset
        self.length = length
        self.size = size
        super().__init__(
            f"Cannot have offset of {offset} and length of {length} with array of length {size}"
        )
