"""Pydantic models for protoutline configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ParserConfig(BaseModel):
    """Outline parser behaviour."""

    model_config = ConfigDict(extra="forbid")

    strict_end_of_input: bool = True
    """Fail when the source ends inside a declaration instead of returning a truncated outline."""


class CacheConfig(BaseModel):
    """Per-document outline cache used by the symbol provider.

    Example in config.json:
        "cache": {
            "enabled": true,
            "max_documents": 64
        }
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    """Reuse the outline while a document's version is unchanged."""

    max_documents: int = Field(default=256, ge=1)
    """Maximum number of documents kept; least recently parsed are evicted first."""


class LoggingConfig(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "WARNING"
    """Level for the protoutline logger."""

    log_transient_errors: bool = False
    """Log parse failures at WARNING even while a document has unsaved edits."""


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    parser: ParserConfig = ParserConfig()
    cache: CacheConfig = CacheConfig()
    logging: LoggingConfig = LoggingConfig()
