"""Command line entry point: encode a file or stdin to Base64 on stdout."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

import structlog

from .base64_ import encode
from .config import LoggingConfig, load_settings
from .errors import CodecError
from .options import EncodeOptions


def configure_logging(config: LoggingConfig) -> None:
    """Send structured diagnostics to stderr so stdout carries only the encoding."""

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if config.json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared_processors)
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def build_parser(defaults: EncodeOptions) -> argparse.ArgumentParser:
    """Return the argument parser, seeded with the environment defaults."""

    parser = argparse.ArgumentParser(prog="radix64", description=__doc__)
    parser.add_argument("path", nargs="?", default="-", help="input file, '-' for stdin")
    parser.add_argument("--offset", type=int, default=0, help="first byte to encode")
    parser.add_argument("--length", type=int, default=None, help="number of bytes to encode")
    parser.add_argument(
        "--break-lines",
        action=argparse.BooleanOptionalAction,
        default=defaults.break_lines,
        help="insert a newline every 76 symbols",
    )
    parser.add_argument(
        "--url-safe",
        action=argparse.BooleanOptionalAction,
        default=defaults.url_safe,
        help="use the URL- and filename-safe alphabet",
    )
    parser.add_argument(
        "--ordered",
        action=argparse.BooleanOptionalAction,
        default=defaults.ordered,
        help="use the ordered alphabet (ignored with --url-safe)",
    )
    return parser


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the encoder and return the process exit status."""

    config = load_settings()
    configure_logging(config.logging)
    logger = structlog.get_logger("radix64")

    args = build_parser(config.options).parse_args(argv)
    options = EncodeOptions(
        break_lines=args.break_lines,
        url_safe=args.url_safe,
        ordered=args.ordered,
    )
    try:
        data = _read_input(args.path)
    except OSError as exc:
        logger.error("input_unreadable", path=args.path, error=str(exc))
        sys.stderr.write(f"radix64: {exc}\n")
        return 1
    try:
        text = encode(data, args.offset, args.length, options=options, encoding=config.codec.text_encoding)
    except CodecError as exc:
        logger.error("encode_failed", error=str(exc))
        sys.stderr.write(f"radix64: {exc}\n")
        return 2

    sys.stdout.write(text if not text or text.endswith("\n") else text + "\n")
    logger.info("encode_finished", path=args.path, input_size=len(data), output_size=len(text))
    return 0


def run() -> None:
    """Entry-point helper used by command line scripts."""

    sys.exit(main())


if __name__ == "__main__":
    run()
