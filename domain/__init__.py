"""
Domain layer: entities, validation rules and vocabularies. No I/O, no logging.

Contains:
- entities: LearningObject and the entities it owns or references
- schemas: Pydantic models for JSON payloads and attached value objects
- taxonomy: Bloom vocabularies and the active taxonomy
- errors: validation error types
"""

from domain.entities import (
    AssessmentPlan,
    InstructionalStrategy,
    LearningGoal,
    LearningObject,
    LearningOutcome,
    StandardOutcome,
    SubmittableLearningOutcome,
    User,
)
from domain.errors import EntityError

__all__ = [
    "User",
    "StandardOutcome",
    "LearningGoal",
    "AssessmentPlan",
    "InstructionalStrategy",
    "LearningOutcome",
    "SubmittableLearningOutcome",
    "LearningObject",
    "EntityError",
]
