"""Configuration objects and helpers."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .base64_ import PREFERRED_ENCODING, check_text_encoding
from .options import EncodeOptions


@dataclass(slots=True, frozen=True)
class CodecConfig:
    """Default encoder behaviour."""

    options: EncodeOptions
    text_encoding: str


@dataclass(slots=True, frozen=True)
class LoggingConfig:
    """Diagnostics emitted on stderr by the command line tool."""

    level: int
    json: bool


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Aggregate application configuration dataclass."""

    codec: CodecConfig
    logging: LoggingConfig

    @property
    def options(self) -> EncodeOptions:
        """Return the configured default encode options."""

        return self.codec.options


class Settings(BaseSettings):
    """Encoder defaults parsed from ``BASE64_*`` and ``LOG_*`` variables."""

    break_lines: bool = Field(False, alias="BASE64_BREAK_LINES")
    url_safe: bool = Field(False, alias="BASE64_URL_SAFE")
    ordered: bool = Field(False, alias="BASE64_ORDERED")
    text_encoding: str = Field(PREFERRED_ENCODING, alias="BASE64_TEXT_ENCODING")
    log_level: int = Field(logging.WARNING, alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("text_encoding")
    @classmethod
    def _normalize_text_encoding(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("BASE64_TEXT_ENCODING must not be empty")
        try:
            return check_text_encoding(name)
        except LookupError:
            # Unknown codecs are tolerated; encoding falls back at call time.
            return name

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: object) -> int:
        if isinstance(value, int):
            return value
        text = str(value).strip()
        if text.isdigit():
            return int(text)
        level = logging.getLevelName(text.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def to_dataclass(self) -> AppConfig:
        """Transform runtime settings into frozen dataclasses."""

        codec_config = CodecConfig(
            options=EncodeOptions(
                break_lines=self.break_lines,
                url_safe=self.url_safe,
                ordered=self.ordered,
            ),
            text_encoding=self.text_encoding,
        )
        logging_config = LoggingConfig(level=self.log_level, json=self.log_json)
        return AppConfig(codec=codec_config, logging=logging_config)


def load_settings() -> AppConfig:
    """Load settings from the environment and return dataclasses."""

    return Settings().to_dataclass()


__all__ = [
    "AppConfig",
    "CodecConfig",
    "LoggingConfig",
    "Settings",
    "load_settings",
]
