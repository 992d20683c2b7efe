"""Encoder options."""

from __future__ import annotations

from dataclasses import dataclass

from .alphabet import Dialect

__all__ = ["EncodeOptions"]


@dataclass(slots=True, frozen=True)
class EncodeOptions:
    """Flags controlling a single encode call."""

    break_lines: bool = False
    url_safe: bool = False
    ordered: bool = False

    @property
    def dialect(self) -> Dialect:
        """Resolve the alphabet dialect, URL-safe winning over ordered."""

        if self.url_safe:
            return Dialect.URL_SAFE
        if self.ordered:
            return Dialect.ORDERED
        return Dialect.STANDARD
