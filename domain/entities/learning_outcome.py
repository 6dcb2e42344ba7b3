"""Learning outcome: what a learning object should enable students to achieve."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from domain.entities.assessment_plan import AssessmentPlan, SubmittableAssessmentPlan
from domain.entities.base import as_payload, splice_one
from domain.entities.instructional_strategy import InstructionalStrategy, SubmittableInstructionalStrategy
from domain.entities.outcome import Outcome
from domain.entities.standard_outcome import StandardOutcome
from domain.entities.user import User
from domain.errors import InvalidBloom, InvalidText, InvalidVerb
from domain.schemas import LearningOutcomePayload, StandardOutcomePayload
from domain.taxonomy import get_taxonomy

if TYPE_CHECKING:
    from domain.entities.learning_object import LearningObject


@dataclass(frozen=True)
class OutcomeSource:
    """Snapshot of the owning learning object, taken when the outcome is created."""

    author: User
    name: str
    date: datetime


class LearningOutcome:
    """
    A learning outcome of a learning object.

    Business Rules:
    - bloom must be a Bloom taxon of the active taxonomy
    - verb must belong to the verbs of the bloom current at assignment time;
      changing bloom later does not re-validate the verb
    - tag is unique over the source's outcomes at construction time
    - assessments and strategies take a snapshot of the bloom when added
    - mappings are references; the outcome does not own them
    """

    assessment_cls: ClassVar[type[AssessmentPlan]] = AssessmentPlan
    strategy_cls: ClassVar[type[InstructionalStrategy]] = InstructionalStrategy

    def __init__(self, source: "LearningObject | None" = None) -> None:
        self.id: str | None = None  # assigned by the store, not by this model
        self._source = OutcomeSource(source.author, source.name, source.date) if source is not None else None
        self._tag = self._free_tag(source)

        taxonomy = get_taxonomy()
        self._bloom = taxonomy.default_level()
        self._verb = taxonomy.default_verb(self._bloom)
        self._text = ""
        self._mappings: list[Outcome] = []
        self._assessments: list[AssessmentPlan] = []
        self._strategies: list[InstructionalStrategy] = []
        self.extras: dict[str, Any] = {}

    @staticmethod
    def _free_tag(source: "LearningObject | None") -> int:
        """Smallest non-negative tag not used by the source's outcomes."""
        tag = 0
        if source is None:
            return tag
        # Rescan from the top after every bump
        searching = True
        while searching:
            searching = False
            for outcome in source.outcomes:
                if outcome.tag == tag:
                    tag += 1
                    searching = True
                    break
        return tag

    @property
    def source(self) -> OutcomeSource | None:
        return self._source

    @property
    def tag(self) -> int:
        return self._tag

    @property
    def bloom(self) -> str:
        """The Bloom taxon of this outcome."""
        return self._bloom

    @bloom.setter
    def bloom(self, bloom: str) -> None:
        if not get_taxonomy().has_level(bloom):
            raise InvalidBloom(bloom)
        self._bloom = bloom

    @property
    def verb(self) -> str:
        """The verb the outcome text starts with (eg. define)."""
        return self._verb

    @verb.setter
    def verb(self, verb: str) -> None:
        if not get_taxonomy().has_verb(self._bloom, verb):
            raise InvalidVerb(self._bloom, verb)
        self._verb = verb

    @property
    def text(self) -> str:
        """Full text description of this outcome, except the verb."""
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        if not isinstance(text, str):
            raise InvalidText(text)
        self._text = text.strip()

    # ---- Outcome protocol ----

    @property
    def author(self) -> str:
        return self._source.author.name if self._source is not None else ""

    @property
    def name(self) -> str:
        return self._source.name if self._source is not None else ""

    @property
    def date(self) -> str:
        return self._source.date.isoformat() if self._source is not None else ""

    @property
    def outcome(self) -> str:
        return f"{self._verb} {self._text}"

    # ---- Collections ----

    @property
    def mappings(self) -> tuple[Outcome, ...]:
        return tuple(self._mappings)

    def map_to(self, mapping: Outcome) -> int:
        """Map an outcome to this one. Returns the index of the mapping."""
        self._mappings.append(mapping)
        return len(self._mappings) - 1

    def unmap(self, index: int) -> Outcome | None:
        return splice_one(self._mappings, index)

    @property
    def assessments(self) -> tuple[AssessmentPlan, ...]:
        return tuple(self._assessments)

    def add_assessment(self) -> AssessmentPlan:
        """Add a new, blank assessment plan bound to the current bloom."""
        assessment = self.assessment_cls(self._bloom)
        self._assessments.append(assessment)
        return assessment

    def remove_assessment(self, index: int) -> AssessmentPlan | None:
        return splice_one(self._assessments, index)

    @property
    def strategies(self) -> tuple[InstructionalStrategy, ...]:
        return tuple(self._strategies)

    def add_strategy(self) -> InstructionalStrategy:
        """Add a new, blank instructional strategy bound to the current bloom."""
        strategy = self.strategy_cls(self._bloom)
        self._strategies.append(strategy)
        return strategy

    def remove_strategy(self, index: int) -> InstructionalStrategy | None:
        return splice_one(self._strategies, index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tag={self._tag}, bloom={self._bloom!r}, verb={self._verb!r})"

    # ---- Serialization ----

    def to_payload(self) -> LearningOutcomePayload:
        fields: dict[str, Any] = {
            **self.extras,
            "id": self.id,
            "tag": self._tag,
            "bloom": self._bloom,
            "verb": self._verb,
            "text": self._text,
            "mappings": [
                StandardOutcomePayload(author=m.author, name=m.name, date=m.date, outcome=m.outcome)
                for m in self._mappings
            ],
            "assessments": [a.to_payload() for a in self._assessments],
            "strategies": [s.to_payload() for s in self._strategies],
        }
        return LearningOutcomePayload(**fields)

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(mode="json", by_alias=True)

    @classmethod
    def instantiate(
        cls,
        source: "LearningObject | None",
        payload: LearningOutcomePayload | Mapping[str, Any],
    ) -> "LearningOutcome":
        """
        Rebuild an outcome from a payload.

        tag, bloom, verb and text are restored as stored, without setter
        validation. A missing tag keeps the smallest free tag of
        the source. A missing bloom keeps the first taxon; a missing verb falls
        back to the first verb of the restored bloom. Assessments and strategies go through their own
        instantiate, which re-validates their kinds. Unknown keys are kept in
        `extras` and written back by `to_payload`.
        """
        data = as_payload(LearningOutcomePayload, payload)
        outcome = cls(source)
        outcome.id = data.id
        if data.tag is not None:
            outcome._tag = data.tag
        if data.bloom:
            outcome._bloom = data.bloom
            taxonomy = get_taxonomy()
            if taxonomy.has_level(data.bloom):
                outcome._verb = taxonomy.default_verb(data.bloom)
        if data.verb:
            outcome._verb = data.verb
        outcome._text = data.text
        outcome._mappings = [StandardOutcome.instantiate(m) for m in data.mappings]
        outcome._assessments = [cls.assessment_cls.instantiate(a) for a in data.assessments]
        outcome._strategies = [cls.strategy_cls.instantiate(s) for s in data.strategies]
        outcome.extras = dict(data.model_extra or {})
        return outcome

    @staticmethod
    def serialize(entity: "LearningOutcome") -> str:
        return entity.to_payload().model_dump_json(by_alias=True)

    @classmethod
    def unserialize(cls, msg: str, parent: "LearningObject | None") -> "LearningOutcome":
        return cls.instantiate(parent, LearningOutcomePayload.model_validate_json(msg))


class SubmittableLearningOutcome(LearningOutcome):
    """
    Learning outcome ready for submission: its text, and the text of every
    assessment plan and instructional strategy it owns, must be non-empty.
    """

    assessment_cls = SubmittableAssessmentPlan
    strategy_cls = SubmittableInstructionalStrategy

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        if not isinstance(text, str) or not text.strip():
            raise InvalidText(text)
        self._text = text.strip()

    @classmethod
    def instantiate(
        cls,
        source: "LearningObject | None",
        payload: LearningOutcomePayload | Mapping[str, Any],
    ) -> "SubmittableLearningOutcome":
        outcome = super().instantiate(source, payload)
        outcome.text = outcome.text
        return outcome  # type: ignore[return-value]

    @classmethod
    def from_outcome(cls, outcome: LearningOutcome) -> "SubmittableLearningOutcome":
        """Promote a draft outcome, validating every text it carries."""
        submittable = cls.instantiate(None, outcome.to_payload())
        submittable._source = outcome.source
        submittable._mappings = list(outcome.mappings)
        return submittable
