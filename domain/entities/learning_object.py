"""Learning object: the aggregate root of the content hierarchy."""

from collections.abc import Iterator, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from domain.entities.base import as_payload, plain, splice_one
from domain.entities.learning_goal import LearningGoal
from domain.entities.learning_outcome import LearningOutcome
from domain.entities.user import User
from domain.errors import (
    InvalidChild,
    InvalidLength,
    InvalidLevel,
    InvalidLevels,
    InvalidName,
    InvalidStatus,
    LevelAlreadyExists,
)
from domain.schemas import (
    AcademicLevel,
    Length,
    LearningObjectLock,
    LearningObjectPayload,
    Material,
    Metrics,
    Status,
)
from domain.taxonomy import get_taxonomy


def _default_level() -> str:
    taxonomy = get_taxonomy()
    if taxonomy.has_academic_level(AcademicLevel.UNDERGRADUATE.value):
        return AcademicLevel.UNDERGRADUATE.value
    return taxonomy.academic_levels[0]


class LearningObject:
    """
    A learning object and everything it owns.

    Business Rules:
    - levels is never empty and holds no duplicates
    - length and status are always members of their fixed sets
    - name is always the trimmed input
    - date is the last-modified time; only mutations set it, and it strictly
      increases across mutations of one instance
    - goals, outcomes and children are owned; author and contributors are references
    - a learning object can never be its own descendant

    add_* methods return the 0-based index of the new element. remove_*
    methods take an index, return the removed element, and return None
    (leaving the collection untouched) when the index is out of range.
    """

    def __init__(self, author: User | None = None, name: str = "") -> None:
        self._author = author if author is not None else User()
        self._date = datetime.now(UTC)
        self._name = ""
        self.name = name
        self._length = Length.NANOMODULE
        self._levels: list[str] = [_default_level()]
        self._goals: list[LearningGoal] = []
        self._outcomes: list[LearningOutcome] = []
        self._materials = Material()
        self._metrics = Metrics()
        self._children: list[LearningObject] = []
        self._contributors: list[User] = []
        self._collection = ""
        self._status = Status.UNPUBLISHED
        self._published = False
        self._lock: LearningObjectLock | None = None

    def _touch(self) -> None:
        """Update the last-modified date."""
        now = datetime.now(UTC)
        if now <= self._date:
            now = self._date + timedelta(microseconds=1)
        self._date = now

    @property
    def author(self) -> User:
        return self._author

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not isinstance(name, str):
            raise InvalidName(name)
        self._name = name.strip()
        self._touch()

    @property
    def length(self) -> Length:
        return self._length

    @length.setter
    def length(self, length: Length | str) -> None:
        try:
            value = Length(length)
        except ValueError:
            raise InvalidLength(length) from None
        self._length = value
        self._touch()

    # ---- Academic levels ----

    @property
    def levels(self) -> tuple[str, ...]:
        return tuple(self._levels)

    def add_level(self, level: AcademicLevel | str) -> None:
        value = plain(level)
        if value in self._levels:
            raise LevelAlreadyExists(value)
        if not get_taxonomy().has_academic_level(value):
            raise InvalidLevel(value)
        self._levels.append(value)  # type: ignore[arg-type]
        self._touch()

    def remove_level(self, index: int) -> str | None:
        if len(self._levels) <= 1:
            raise InvalidLevels()
        removed = splice_one(self._levels, index)
        if removed is not None:
            self._touch()
        return removed

    # ---- Owned collections ----

    def _remove(self, items: list, index: int) -> Any:
        removed = splice_one(items, index)
        if removed is not None:
            self._touch()
        return removed

    @property
    def goals(self) -> tuple[LearningGoal, ...]:
        return tuple(self._goals)

    def add_goal(self, text: str | None = "") -> int:
        self._goals.append(LearningGoal(self, text))
        self._touch()
        return len(self._goals) - 1

    def remove_goal(self, index: int) -> LearningGoal | None:
        return self._remove(self._goals, index)

    @property
    def outcomes(self) -> tuple[LearningOutcome, ...]:
        return tuple(self._outcomes)

    def add_outcome(self, outcome: LearningOutcome | None = None) -> int:
        """Add the given outcome, or a new blank one tagged for this object."""
        self._outcomes.append(outcome if outcome is not None else LearningOutcome(self))
        self._touch()
        return len(self._outcomes) - 1

    def remove_outcome(self, index: int) -> LearningOutcome | None:
        return self._remove(self._outcomes, index)

    @property
    def children(self) -> tuple["LearningObject", ...]:
        return tuple(self._children)

    def iter_descendants(self) -> Iterator["LearningObject"]:
        """Depth-first walk over every child, grandchild, and so on."""
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def add_child(self, child: "LearningObject") -> int:
        if child is self or any(node is self for node in child.iter_descendants()):
            raise InvalidChild(child)
        self._children.append(child)
        self._touch()
        return len(self._children) - 1

    def remove_child(self, index: int) -> "LearningObject | None":
        return self._remove(self._children, index)

    @property
    def contributors(self) -> tuple[User, ...]:
        return tuple(self._contributors)

    def add_contributor(self, contributor: User) -> int:
        self._contributors.append(contributor)
        self._touch()
        return len(self._contributors) - 1

    def remove_contributor(self, index: int) -> User | None:
        return self._remove(self._contributors, index)

    @property
    def materials(self) -> Material:
        return self._materials

    @materials.setter
    def materials(self, materials: Material | Mapping[str, Any]) -> None:
        self._materials = as_payload(Material, materials)
        self._touch()

    # ---- Metadata (does not touch the date) ----

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @metrics.setter
    def metrics(self, metrics: Metrics | Mapping[str, Any]) -> None:
        self._metrics = as_payload(Metrics, metrics)

    @property
    def collection(self) -> str:
        """Free-text grouping label."""
        return self._collection

    @collection.setter
    def collection(self, collection: str) -> None:
        if not isinstance(collection, str):
            raise TypeError(f"collection must be a string, got {type(collection).__name__}")
        self._collection = collection

    @property
    def lock(self) -> LearningObjectLock | None:
        return self._lock

    @lock.setter
    def lock(self, lock: LearningObjectLock | Mapping[str, Any] | None) -> None:
        self._lock = as_payload(LearningObjectLock, lock) if lock is not None else None

    # ---- Status ----

    @property
    def status(self) -> Status:
        return self._status

    @status.setter
    def status(self, status: Status | str) -> None:
        try:
            value = Status(status)
        except ValueError:
            raise InvalidStatus(status) from None
        # Publishing is the only way to raise the published flag; re-publishing
        # an already published object just raises the flag again.
        if value is Status.PUBLISHED:
            self.publish()
        else:
            self._status = value

    @property
    def published(self) -> bool:
        return self._published

    def publish(self) -> None:
        self._status = Status.PUBLISHED
        self._published = True

    def unpublish(self) -> None:
        """Lower the published flag. The status is left as is."""
        self._published = False

    def __repr__(self) -> str:
        return f"LearningObject(name={self._name!r}, length={self._length.value!r}, status={self._status.value!r})"

    # ---- Serialization ----

    def to_payload(self) -> LearningObjectPayload:
        return LearningObjectPayload(
            author=self._author.to_payload(),
            name=self._name,
            date=self._date,
            length=self._length.value,
            levels=list(self._levels),
            goals=[goal.to_payload() for goal in self._goals],
            outcomes=[outcome.to_payload() for outcome in self._outcomes],
            materials=self._materials,
            metrics=self._metrics,
            children=[child.to_payload() for child in self._children],
            contributors=[user.to_payload() for user in self._contributors],
            collection=self._collection,
            status=self._status.value,
            published=self._published,
            lock=self._lock,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(mode="json", by_alias=True)

    @classmethod
    def instantiate(cls, payload: LearningObjectPayload | Mapping[str, Any]) -> "LearningObject":
        """
        Rebuild a full learning-object graph from a plain nested payload.

        Every element is re-added through the public mutators, so validation
        runs again against the active taxonomy. A payload saved under an older
        vocabulary can therefore fail to load.

        Raises:
            pydantic.ValidationError: If the payload has the wrong shape
            EntityError: If any value fails entity validation
        """
        data = as_payload(LearningObjectPayload, payload)
        author = User.instantiate(data.author) if data.author is not None else None
        entity = cls(author, data.name or "")

        if data.length:
            entity.length = data.length
        if data.levels is not None:
            if not data.levels:
                raise InvalidLevels()
            # Stored levels replace the default instead of extending it
            entity._levels = []
            for level in data.levels:
                entity.add_level(level)
        for goal in data.goals:
            entity.add_goal(goal.text)
        for outcome in data.outcomes:
            entity.add_outcome(LearningOutcome.instantiate(entity, outcome))
        if data.materials is not None:
            entity.materials = data.materials
        if data.metrics is not None:
            entity.metrics = data.metrics
        for child in data.children:
            entity.add_child(cls.instantiate(child))
        for contributor in data.contributors:
            entity.add_contributor(User.instantiate(contributor))
        if data.collection:
            entity.collection = data.collection
        if data.status:
            entity.status = data.status
        entity._published = data.published
        entity.lock = data.lock

        if data.date is not None:
            entity._date = data.date
        return entity

    @staticmethod
    def serialize(entity: "LearningObject") -> str:
        return entity.to_payload().model_dump_json(by_alias=True)

    @classmethod
    def unserialize(cls, msg: str) -> "LearningObject":
        return cls.instantiate(LearningObjectPayload.model_validate_json(msg))
