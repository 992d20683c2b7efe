"""Base64 alphabets and dialect selection."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .options import EncodeOptions

__all__ = [
    "MAX_LINE_LENGTH",
    "NEW_LINE",
    "PAD",
    "Dialect",
    "ORDERED_ALPHABET",
    "STANDARD_ALPHABET",
    "URL_SAFE_ALPHABET",
    "alphabet_for",
    "select_alphabet",
]

MAX_LINE_LENGTH: Final = 76
PAD: Final = ord("=")
NEW_LINE: Final = ord("\n")

STANDARD_ALPHABET: Final = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# RFC 3548 section 4: "-" and "_" replace "+" and "/".
URL_SAFE_ALPHABET: Final = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

# Symbols in ascending ASCII order so encoded values sort like the raw bytes.
ORDERED_ALPHABET: Final = b"-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"


class Dialect(str, Enum):
    """Alphabet flavours understood by the encoder."""

    STANDARD = "standard"
    URL_SAFE = "url_safe"
    ORDERED = "ordered"


_ALPHABETS: Final = {
    Dialect.STANDARD: STANDARD_ALPHABET,
    Dialect.URL_SAFE: URL_SAFE_ALPHABET,
    Dialect.ORDERED: ORDERED_ALPHABET,
}


def alphabet_for(dialect: Dialect) -> bytes:
    """Return the 64-symbol table for ``dialect``."""

    return _ALPHABETS[dialect]


def select_alphabet(options: EncodeOptions) -> bytes:
    """Return the table selected by ``options``.

    ``url_safe`` takes priority when both ``url_safe`` and ``ordered`` are set.
    """

    return alphabet_for(options.dialect)
