"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tag and current document
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_document_context,
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_document_context",
    "make_run_tag",
]
