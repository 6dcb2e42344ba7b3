"""Standard outcome: an independently authored outcome that learning outcomes map to."""

from collections.abc import Mapping
from typing import Any

from domain.entities.base import as_payload
from domain.errors import (
    EntityError,
    InvalidAuthor,
    InvalidDate,
    InvalidOutcomeName,
    InvalidOutcomeText,
)
from domain.schemas import StandardOutcomePayload


class StandardOutcome:
    """
    An outcome drawn from a published standard (organization, document, year).

    Business Rules:
    - Each field must be a non-empty string when assigned through its setter
    - Each field can be assigned once; a set field is read-only afterwards
    - Construction copies only the fields given and never raises
    """

    def __init__(
        self,
        author: str | None = "",
        name: str | None = "",
        date: str | None = "",
        outcome: str | None = "",
    ) -> None:
        self._author = author or ""
        self._name = name or ""
        self._date = date or ""
        self._outcome = outcome or ""

    def _assign(self, field: str, value: object, error: type[EntityError]) -> None:
        if not isinstance(value, str) or not value.strip():
            raise error(value)
        if getattr(self, f"_{field}"):
            raise AttributeError(f"StandardOutcome.{field} is already set")
        setattr(self, f"_{field}", value.strip())

    @property
    def author(self) -> str:
        """The organization or document this outcome is drawn from."""
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._assign("author", value, InvalidAuthor)

    @property
    def name(self) -> str:
        """The label or unit of the outcome."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._assign("name", value, InvalidOutcomeName)

    @property
    def date(self) -> str:
        """The year the standard was established."""
        return self._date

    @date.setter
    def date(self, value: str) -> None:
        self._assign("date", value, InvalidDate)

    @property
    def outcome(self) -> str:
        """The text of the outcome."""
        return self._outcome

    @outcome.setter
    def outcome(self, value: str) -> None:
        self._assign("outcome", value, InvalidOutcomeText)

    def _key(self) -> tuple[str, str, str, str]:
        return (self._author, self._name, self._date, self._outcome)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StandardOutcome):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StandardOutcome(author={self._author!r}, name={self._name!r}, date={self._date!r})"

    def to_payload(self) -> StandardOutcomePayload:
        return StandardOutcomePayload(author=self.author, name=self.name, date=self.date, outcome=self.outcome)

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(mode="json", by_alias=True)

    @classmethod
    def instantiate(cls, payload: StandardOutcomePayload | Mapping[str, Any]) -> "StandardOutcome":
        data = as_payload(StandardOutcomePayload, payload)
        return cls(author=data.author, name=data.name, date=data.date, outcome=data.outcome)

    @staticmethod
    def serialize(entity: "StandardOutcome") -> str:
        return entity.to_payload().model_dump_json(by_alias=True)

    @classmethod
    def unserialize(cls, msg: str) -> "StandardOutcome":
        return cls.instantiate(StandardOutcomePayload.model_validate_json(msg))
