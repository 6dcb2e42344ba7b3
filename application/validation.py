"""Document validation workflow and summary reporting."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from application.documents import canonical_path, iter_object_payloads, save_learning_objects
from domain.entities import LearningObject, SubmittableLearningOutcome
from domain.errors import EntityError
from infrastructure.io import read_json
from infrastructure.observability import clear_document_context, set_log_context

logger = logging.getLogger(__name__)


@dataclass
class DocumentReport:
    """Result of validating one document."""

    path: Path
    objects: list[LearningObject] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    outcome_count: int = 0
    written_to: Path | None = None

    @property
    def ok(self) -> bool:
        return not self.errors


def _walk(obj: LearningObject) -> list[LearningObject]:
    return [obj, *obj.iter_descendants()]


def check_submittable(obj: LearningObject) -> list[str]:
    """
    Check that every outcome in the tree is ready for submission.

    Returns:
        One message per outcome that fails the stricter text checks
    """
    problems: list[str] = []
    for node in _walk(obj):
        for outcome in node.outcomes:
            try:
                SubmittableLearningOutcome.from_outcome(outcome)
            except EntityError as e:
                problems.append(f"{node.name or '<unnamed>'} outcome tag={outcome.tag}: {e.message}")
    return problems


def validate_document(
    path: Path,
    *,
    strict_outcomes: bool = False,
    rewrite: bool = False,
    indent: int | None = 2,
) -> DocumentReport:
    """
    Load and re-validate every learning object in a document.

    Failures are collected per object instead of raised, so one bad object
    does not hide the others.

    Args:
        path: JSON document to check
        strict_outcomes: Also require every outcome to pass submission checks
        rewrite: Write a canonical copy next to the document when it is valid
        indent: JSON indent for the canonical copy

    Returns:
        DocumentReport with loaded objects and error messages
    """
    report = DocumentReport(path=path)
    set_log_context(document=path)
    try:
        try:
            payloads = iter_object_payloads(read_json(path))
        except (OSError, ValueError) as e:
            logger.error("Cannot read document: %s", e)
            report.errors.append(str(e))
            return report

        for i, payload in enumerate(payloads):
            try:
                obj = LearningObject.instantiate(payload)
            except ValidationError as e:
                logger.error("Object %d has an invalid structure: %d error(s)", i, e.error_count())
                logger.debug("Validation details for object %d:\n%s", i, e)
                report.errors.append(f"object {i}: invalid structure ({e.error_count()} error(s))")
                continue
            except EntityError as e:
                logger.error("Object %d failed validation: %s", i, e.message)
                report.errors.append(f"object {i}: {e.message}")
                continue

            report.objects.append(obj)
            report.outcome_count += sum(len(node.outcomes) for node in _walk(obj))

            if strict_outcomes:
                for problem in check_submittable(obj):
                    logger.error("Object %d: %s", i, problem)
                    report.errors.append(f"object {i}: {problem}")

        logger.info(
            "Checked %d object(s), %d outcome(s), %d error(s)",
            len(payloads),
            report.outcome_count,
            len(report.errors),
        )

        if rewrite and report.ok and report.objects:
            report.written_to = save_learning_objects(report.objects, canonical_path(path), indent=indent)
        return report
    finally:
        clear_document_context()


def validate_documents(
    paths: list[Path],
    *,
    strict_outcomes: bool = False,
    rewrite: bool = False,
    indent: int | None = 2,
) -> list[DocumentReport]:
    """Validate several documents in order."""
    return [
        validate_document(path, strict_outcomes=strict_outcomes, rewrite=rewrite, indent=indent) for path in paths
    ]


def log_validation_summary(reports: list[DocumentReport]) -> None:
    """Log a concise, human-readable validation summary."""
    logger.info("=== Validation Summary ===")

    failed = [r for r in reports if not r.ok]
    logger.info(
        "Documents: %d checked, %d valid, %d failed",
        len(reports),
        len(reports) - len(failed),
        len(failed),
    )
    logger.info("Learning objects loaded: %d", sum(len(r.objects) for r in reports))
    logger.info("Learning outcomes checked: %d", sum(r.outcome_count for r in reports))

    for report in reports:
        if report.written_to is not None:
            logger.info("Canonical copy: %s -> %s", report.path, report.written_to)

    if failed:
        logger.warning("--- Failed documents ---")
        for report in failed:
            logger.warning("%s", report.path)
            for error in report.errors:
                logger.warning("  %s", error)
