"""Base class for learning-outcome children whose kind is constrained by a Bloom taxon."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self

from pydantic import BaseModel

from domain.errors import InvalidBloom, InvalidPlanKind, InvalidText
from domain.taxonomy import Taxonomy, get_taxonomy


class BloomScopedItem(ABC):
    """
    An assessment plan or instructional strategy.

    `source_bloom` is a snapshot of the owning outcome's bloom taken at
    construction. Later changes to the outcome's bloom do not affect it; the
    kind keeps validating against the snapshot.

    Subclasses must implement:
    - _accepts(): membership test for the kind vocabulary of a taxon
    - _default_kind(): first kind of that vocabulary
    """

    payload_cls: ClassVar[type[BaseModel]]
    kind_label: ClassVar[str] = "kind"
    require_text: ClassVar[bool] = False

    def __init__(self, source_bloom: str) -> None:
        taxonomy = get_taxonomy()
        if not taxonomy.has_level(source_bloom):
            raise InvalidBloom(source_bloom)
        self._source_bloom = source_bloom
        self._kind = self._default_kind(taxonomy, source_bloom)
        self._text: str | None = ""

    @abstractmethod
    def _accepts(self, taxonomy: Taxonomy, bloom: str, kind: object) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _default_kind(self, taxonomy: Taxonomy, bloom: str) -> str:
        raise NotImplementedError

    @property
    def source_bloom(self) -> str:
        return self._source_bloom

    def _set_kind(self, kind: str) -> None:
        if not self._accepts(get_taxonomy(), self._source_bloom, kind):
            raise InvalidPlanKind(self._source_bloom, kind, self.kind_label)
        self._kind = kind

    @property
    def text(self) -> str | None:
        """Full text description."""
        return self._text

    @text.setter
    def text(self, text: str | None) -> None:
        if self.require_text:
            if not isinstance(text, str) or not text.strip():
                raise InvalidText(text)
            text = text.strip()
        self._text = text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source_bloom={self._source_bloom!r}, {self.kind_label}={self._kind!r})"

    @abstractmethod
    def to_payload(self) -> BaseModel:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(mode="json", by_alias=True)

    @classmethod
    def _blank(cls, source_bloom: str | None) -> Self:
        """New item for a payload; a missing source bloom falls back to the first taxon."""
        return cls(source_bloom or get_taxonomy().default_level())

    @classmethod
    @abstractmethod
    def instantiate(cls, payload: Any) -> "BloomScopedItem":
        raise NotImplementedError

    @staticmethod
    def serialize(entity: "BloomScopedItem") -> str:
        return entity.to_payload().model_dump_json(by_alias=True)

    @classmethod
    def unserialize(cls, msg: str) -> "BloomScopedItem":
        return cls.instantiate(cls.payload_cls.model_validate_json(msg))
