"""Instructional strategy: how a learning outcome is taught."""

from collections.abc import Mapping
from typing import Any

from domain.entities.base import as_payload
from domain.entities.bloom_scoped import BloomScopedItem
from domain.schemas import InstructionalStrategyPayload
from domain.taxonomy import Taxonomy


class InstructionalStrategy(BloomScopedItem):
    """A strategy on how to achieve an outcome (lecture, lab, etc.)."""

    payload_cls = InstructionalStrategyPayload
    kind_label = "instructional strategy"

    def _accepts(self, taxonomy: Taxonomy, bloom: str, kind: object) -> bool:
        return taxonomy.has_instruction(bloom, kind)

    def _default_kind(self, taxonomy: Taxonomy, bloom: str) -> str:
        return taxonomy.default_instruction(bloom)

    @property
    def strategy(self) -> str:
        return self._kind

    @strategy.setter
    def strategy(self, strategy: str) -> None:
        self._set_kind(strategy)

    def to_payload(self) -> InstructionalStrategyPayload:
        return InstructionalStrategyPayload(source_bloom=self.source_bloom, strategy=self.strategy, text=self.text)

    @classmethod
    def instantiate(cls, payload: InstructionalStrategyPayload | Mapping[str, Any]) -> "InstructionalStrategy":
        data = as_payload(InstructionalStrategyPayload, payload)
        strategy = cls._blank(data.source_bloom)
        if data.strategy:
            strategy.strategy = data.strategy
        strategy.text = data.text
        return strategy


class SubmittableInstructionalStrategy(InstructionalStrategy):
    """Instructional strategy whose text must be non-empty."""

    require_text = True
