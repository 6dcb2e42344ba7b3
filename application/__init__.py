"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing document loading, canonical rewriting and validation.
"""

from application.documents import (
    canonical_path,
    iter_object_payloads,
    load_learning_objects,
    save_learning_objects,
)
from application.validation import (
    DocumentReport,
    check_submittable,
    log_validation_summary,
    validate_document,
    validate_documents,
)

__all__ = [
    # Main workflows
    "validate_document",
    "validate_documents",
    "log_validation_summary",
    "DocumentReport",
    "check_submittable",
    # Document utilities
    "load_learning_objects",
    "save_learning_objects",
    "iter_object_payloads",
    "canonical_path",
]
