"""Base64 encoder with standard, URL-safe and ordered alphabets."""

from .alphabet import (
    MAX_LINE_LENGTH,
    ORDERED_ALPHABET,
    STANDARD_ALPHABET,
    URL_SAFE_ALPHABET,
    Dialect,
    select_alphabet,
)
from .base64_ import encode, encode_to_bytes, encode_with
from .errors import CodecError, InvalidRangeError, NullInputError
from .length import encoded_length
from .options import EncodeOptions

__all__ = [
    "MAX_LINE_LENGTH",
    "ORDERED_ALPHABET",
    "STANDARD_ALPHABET",
    "URL_SAFE_ALPHABET",
    "CodecError",
    "Dialect",
    "EncodeOptions",
    "InvalidRangeError",
    "NullInputError",
    "encode",
    "encode_to_bytes",
    "encode_with",
    "encoded_length",
    "select_alphabet",
]
