"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import TAXONOMY_FILE

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Console and file logging settings."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = Field(
        default=None,
        description="Rotating log file. If None, logs go to the console only.",
    )
    max_bytes: int = 10_000_000
    backup_count: int = 5

    @model_validator(mode="after")
    def _validate(self) -> "LoggingConfig":
        self.console_level = self.console_level.strip().upper()
        self.file_level = self.file_level.strip().upper()
        for name in (self.console_level, self.file_level):
            if name not in _LEVEL_NAMES:
                raise ValueError(f"Invalid log level {name!r}; expected one of {list(_LEVEL_NAMES)}")
        if self.max_bytes <= 0:
            raise ValueError("logging.max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("logging.backup_count must be non-negative")
        return self

    @property
    def console_level_no(self) -> int:
        return getattr(logging, self.console_level)

    @property
    def file_level_no(self) -> int:
        return getattr(logging, self.file_level)


class DocumentsConfig(BaseModel):
    """How learning-object documents are checked and written."""

    strict_outcomes: bool = Field(
        default=False,
        description="If true, every outcome must also pass submission checks (non-empty texts).",
    )
    indent: int | None = Field(
        default=2,
        description="JSON indent used when rewriting documents. None writes compact JSON.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "DocumentsConfig":
        if self.indent is not None and self.indent < 0:
            raise ValueError("documents.indent must be non-negative")
        return self


class AppConfig(BaseModel):
    """Resolved application settings."""

    taxonomy_file: Path | None = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="YAML taxonomy to install. If None, the bundled vocabulary is used.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)
