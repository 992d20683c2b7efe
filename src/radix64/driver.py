"""Encoding loop that assembles the output buffer."""

from __future__ import annotations

from collections.abc import Sequence

from .alphabet import MAX_LINE_LENGTH, NEW_LINE, select_alphabet
from .block import encode_3to4
from .options import EncodeOptions

__all__ = ["encode_range"]


def encode_range(
    source: Sequence[int],
    offset: int,
    length: int,
    destination: bytearray,
    options: EncodeOptions,
) -> int:
    """Encode ``source[offset:offset + length]`` into ``destination``.

    Full 3-byte groups are written first. When ``options.break_lines`` is set a
    newline follows every 76 symbols, including the last full line when it
    ends exactly on the boundary. A trailing 1- or 2-byte remainder becomes a
    padded group and is never followed by a newline.

    Returns the number of bytes written.
    """

    alphabet = select_alphabet(options)
    break_lines = options.break_lines
    end = offset + length
    full_end = end - 2

    d = offset
    e = 0
    line_length = 0
    while d < full_end:
        encode_3to4(source, d, 3, destination, e, alphabet)
        d += 3
        e += 4
        line_length += 4
        if break_lines and line_length >= MAX_LINE_LENGTH:
            destination[e] = NEW_LINE
            e += 1
            line_length = 0

    if d < end:
        encode_3to4(source, d, end - d, destination, e, alphabet)
        e += 4

    return e
