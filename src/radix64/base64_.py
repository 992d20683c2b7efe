"""Base64 encoding entry points."""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Final

import structlog

from .alphabet import STANDARD_ALPHABET
from .driver import encode_range
from .errors import InvalidRangeError, NullInputError
from .length import encoded_length
from .options import EncodeOptions

if TYPE_CHECKING:
    from .config import CodecConfig

__all__ = [
    "PREFERRED_ENCODING",
    "check_text_encoding",
    "encode",
    "encode_to_bytes",
    "encode_with",
]

PREFERRED_ENCODING: Final = "ascii"
_FALLBACK_ENCODING: Final = "latin-1"
_NO_OPTIONS: Final = EncodeOptions()
# Every byte the encoder can emit.
_OUTPUT_SYMBOLS: Final = STANDARD_ALPHABET + b"-_=\n"

logger = structlog.get_logger(__name__)


def _as_bytes(source: object) -> bytes | bytearray:
    if source is None:
        logger.debug("encode_rejected", reason="null_input")
        raise NullInputError("Cannot serialize a null array")
    if isinstance(source, (bytes, bytearray)):
        return source
    if isinstance(source, memoryview):
        return source.tobytes()
    raise TypeError(f"source must be bytes-like, not {type(source).__name__}")


def _require_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        logger.debug("encode_rejected", reason="invalid_type", argument=name)
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")


def _resolve_range(size: int, offset: int, length: int | None) -> tuple[int, int]:
    _require_int("offset", offset)
    if length is None:
        length = max(size - offset, 0)
    else:
        _require_int("length", length)
    if offset < 0 or length < 0 or offset + length > size:
        logger.debug("encode_rejected", reason="invalid_range", offset=offset, length=length, size=size)
        raise InvalidRangeError(offset, length, size)
    return offset, length


def check_text_encoding(encoding: str) -> str:
    """Return the canonical name of ``encoding`` if it maps ASCII to itself.

    Raises :class:`LookupError` for codecs unknown to the host and
    :class:`ValueError` for codecs such as ``utf-16`` or ``cp500`` that would
    turn the encoded symbols into different characters.
    """

    canonical = codecs.lookup(encoding).name
    try:
        decoded = _OUTPUT_SYMBOLS.decode(canonical)
    except (LookupError, UnicodeDecodeError) as exc:
        raise ValueError(f"Text encoding is not ASCII compatible: {encoding}") from exc
    if decoded != _OUTPUT_SYMBOLS.decode("ascii"):
        raise ValueError(f"Text encoding is not ASCII compatible: {encoding}")
    return canonical


def _to_text(encoded: bytes, encoding: str) -> str:
    try:
        canonical = check_text_encoding(encoding)
    except (LookupError, ValueError) as exc:
        # Every alphabet symbol is ASCII, so a byte-per-character decode is exact.
        logger.warning(
            "text_encoding_fallback",
            encoding=encoding,
            fallback=_FALLBACK_ENCODING,
            reason=str(exc),
        )
        return encoded.decode(_FALLBACK_ENCODING)
    return encoded.decode(canonical)


def encode_to_bytes(
    source: bytes | bytearray | memoryview,
    offset: int = 0,
    length: int | None = None,
    *,
    options: EncodeOptions | None = None,
) -> bytes:
    """Encode ``length`` bytes of ``source`` starting at ``offset``.

    ``length`` defaults to the rest of ``source``. The output buffer is sized
    up front with :func:`radix64.length.encoded_length`; when the driver writes
    fewer bytes the result is trimmed to the written size.

    Raises :class:`NullInputError` for ``None`` and :class:`InvalidRangeError`
    when the range falls outside ``source``. Nothing is allocated before the
    arguments are validated.
    """

    data = _as_bytes(source)
    offset, length = _resolve_range(len(data), offset, length)
    options = options or _NO_OPTIONS

    buffer = bytearray(encoded_length(length, options.break_lines))
    written = encode_range(data, offset, length, buffer, options)
    if written < len(buffer):
        logger.debug("encode_resized", estimated=len(buffer), written=written)
        del buffer[written:]
    logger.debug(
        "encode_complete",
        input_size=length,
        output_size=written,
        dialect=options.dialect.value,
        break_lines=options.break_lines,
    )
    return bytes(buffer)


def encode(
    source: bytes | bytearray | memoryview,
    offset: int = 0,
    length: int | None = None,
    *,
    options: EncodeOptions | None = None,
    encoding: str = PREFERRED_ENCODING,
) -> str:
    """Encode a byte range to Base64 text.

    Called with only ``source`` this is plain standard Base64 without line
    breaks. If ``encoding`` is unknown to the host or does not map ASCII to
    itself the bytes are converted one character per byte instead.
    """

    return _to_text(encode_to_bytes(source, offset, length, options=options), encoding)


def encode_with(source: bytes | bytearray | memoryview, config: CodecConfig) -> str:
    """Encode ``source`` using the options and text encoding from ``config``."""

    return encode(source, options=config.options, encoding=config.text_encoding)
