"""
Logging setup with contextvars-based metadata injection.

- Adds run_tag and the current document name into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infrastructure.io.fs import ensure_parent_dir

# Context variables for dynamic log metadata
cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_document = contextvars.ContextVar("document", default="-")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full run_id.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.document = cv_document.get() or "-"
        return True


def set_log_context(*, run_id_full: str | None = None, document: str | Path | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if run_id_full is not None:
        cv_run_tag.set(make_run_tag(str(run_id_full)))
    if document is not None:
        # File name only; full paths make console lines unreadable
        cv_document.set(Path(document).name)


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "run_tag": str(cv_run_tag.get() or "-"),
        "document": str(cv_document.get() or "-"),
    }


def clear_document_context() -> None:
    """Reset document context to default (keep run info)."""
    cv_document.set("-")


CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s doc=%(document)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s doc=%(document)s | %(message)s"


def _attach(root: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(ContextInjectFilter())
    root.addHandler(handler)


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure root logging: console always, rotating file when log_file is given.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file. If None, logs go to the console only.
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(min(console_level, file_level) if log_file is not None else console_level)

    _attach(root, logging.StreamHandler(), console_level, logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    if log_file is not None:
        rotating = RotatingFileHandler(
            ensure_parent_dir(log_file),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        _attach(root, rotating, file_level, logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file if log_file is not None else "None",
    )
