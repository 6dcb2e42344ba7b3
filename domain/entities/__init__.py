"""
Entities of the content hierarchy, leaf-first.

LearningObject is the aggregate root: it owns goals, outcomes and child
learning objects. LearningOutcome owns assessment plans and instructional
strategies and references standard outcomes.
"""

from domain.entities.assessment_plan import AssessmentPlan, SubmittableAssessmentPlan
from domain.entities.instructional_strategy import InstructionalStrategy, SubmittableInstructionalStrategy
from domain.entities.learning_goal import LearningGoal
from domain.entities.learning_object import LearningObject
from domain.entities.learning_outcome import LearningOutcome, OutcomeSource, SubmittableLearningOutcome
from domain.entities.outcome import Outcome
from domain.entities.standard_outcome import StandardOutcome
from domain.entities.user import User

__all__ = [
    "User",
    "StandardOutcome",
    "Outcome",
    "LearningGoal",
    "AssessmentPlan",
    "SubmittableAssessmentPlan",
    "InstructionalStrategy",
    "SubmittableInstructionalStrategy",
    "LearningOutcome",
    "SubmittableLearningOutcome",
    "OutcomeSource",
    "LearningObject",
]
