"""Learning goal: free text owned by one learning object."""

import weakref
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from domain.entities.base import as_payload
from domain.schemas import LearningGoalPayload

if TYPE_CHECKING:
    from domain.entities.learning_object import LearningObject


class LearningGoal:
    """
    A goal the owning learning object should achieve.

    `source` is a non-owning back-reference to the owner. It is never
    serialized; the owner re-attaches it when the goal is loaded.
    """

    def __init__(self, source: "LearningObject | None" = None, text: str | None = "") -> None:
        self._source = weakref.ref(source) if source is not None else None
        self.text = text

    @property
    def source(self) -> "LearningObject | None":
        return self._source() if self._source is not None else None

    def __repr__(self) -> str:
        return f"LearningGoal(text={self.text!r})"

    def to_payload(self) -> LearningGoalPayload:
        return LearningGoalPayload(text=self.text)

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(mode="json", by_alias=True)

    @classmethod
    def instantiate(
        cls, parent: "LearningObject | None", payload: LearningGoalPayload | Mapping[str, Any]
    ) -> "LearningGoal":
        data = as_payload(LearningGoalPayload, payload)
        return cls(parent, data.text)

    @staticmethod
    def serialize(entity: "LearningGoal") -> str:
        return entity.to_payload().model_dump_json(by_alias=True)

    @classmethod
    def unserialize(cls, msg: str, parent: "LearningObject | None") -> "LearningGoal":
        return cls.instantiate(parent, LearningGoalPayload.model_validate_json(msg))
