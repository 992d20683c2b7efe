"""The 3-byte to 4-symbol block transform."""

from __future__ import annotations

from collections.abc import Sequence

from .alphabet import PAD

__all__ = ["encode_3to4"]


def encode_3to4(
    source: Sequence[int],
    src_offset: int,
    num_sig_bytes: int,
    destination: bytearray,
    dest_offset: int,
    alphabet: bytes,
) -> bytearray:
    """Encode up to three bytes of ``source`` into four symbols of ``destination``.

    The significant bytes are packed most-significant first into a 24-bit
    window and split into four 6-bit indexes into ``alphabet``. Positions not
    covered by significant bytes are filled with ``=``. Capacity of
    ``destination`` is the caller's responsibility.
    """

    if num_sig_bytes <= 0:
        return destination

    window = source[src_offset] << 16
    if num_sig_bytes > 1:
        window |= source[src_offset + 1] << 8
    if num_sig_bytes > 2:
        window |= source[src_offset + 2]

    destination[dest_offset] = alphabet[window >> 18]
    destination[dest_offset + 1] = alphabet[(window >> 12) & 0x3F]
    destination[dest_offset + 2] = alphabet[(window >> 6) & 0x3F] if num_sig_bytes > 1 else PAD
    destination[dest_offset + 3] = alphabet[window & 0x3F] if num_sig_bytes > 2 else PAD
    return destination
