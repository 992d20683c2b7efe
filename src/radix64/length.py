"""Output size prediction."""

from __future__ import annotations

from .alphabet import MAX_LINE_LENGTH

__all__ = ["encoded_length"]


def encoded_length(length: int, break_lines: bool = False) -> int:
    """Return the number of bytes needed to encode ``length`` input bytes.

    With ``break_lines`` one newline is reserved per 76 encoded symbols. This
    overshoots by one byte when the last full line is followed by a single
    padded group that completes the symbol count, see
    :func:`radix64.driver.encode_range`.
    """

    if length < 0:
        raise ValueError("length must be a non-negative integer")
    size = (length // 3) * 4 + (4 if length % 3 else 0)
    if break_lines:
        size += size // MAX_LINE_LENGTH
    return size
