"""Assessment plan: how a learning outcome is assessed."""

from collections.abc import Mapping
from typing import Any

from domain.entities.base import as_payload
from domain.entities.bloom_scoped import BloomScopedItem
from domain.schemas import AssessmentPlanPayload
from domain.taxonomy import Taxonomy


class AssessmentPlan(BloomScopedItem):
    """A plan to assess how well an outcome is achieved (essay, test, etc.)."""

    payload_cls = AssessmentPlanPayload
    kind_label = "assessment plan"

    def _accepts(self, taxonomy: Taxonomy, bloom: str, kind: object) -> bool:
        return taxonomy.has_assessment(bloom, kind)

    def _default_kind(self, taxonomy: Taxonomy, bloom: str) -> str:
        return taxonomy.default_assessment(bloom)

    @property
    def plan(self) -> str:
        """The class of this assessment plan, restricted by the source taxon."""
        return self._kind

    @plan.setter
    def plan(self, plan: str) -> None:
        self._set_kind(plan)

    def to_payload(self) -> AssessmentPlanPayload:
        return AssessmentPlanPayload(source_bloom=self.source_bloom, plan=self.plan, text=self.text)

    @classmethod
    def instantiate(cls, payload: AssessmentPlanPayload | Mapping[str, Any]) -> "AssessmentPlan":
        data = as_payload(AssessmentPlanPayload, payload)
        plan = cls._blank(data.source_bloom)
        if data.plan:
            plan.plan = data.plan
        plan.text = data.text
        return plan


class SubmittableAssessmentPlan(AssessmentPlan):
    """Assessment plan whose text must be non-empty."""

    require_text = True
