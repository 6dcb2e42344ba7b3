"""Taxonomy vocabulary model."""

import re
from functools import cached_property

from pydantic import BaseModel, Field, model_validator

from domain.schemas import AcademicLevel


def normalize_term(raw: object) -> str:
    """
    Normalize a vocabulary term to its canonical key form.

    Examples:
        >>> normalize_term("  Post   Graduate ")
        'post graduate'
        >>> normalize_term(None)
        ''

    Args:
        raw: Raw term (can be None, str, or other types)

    Returns:
        Lowercased term with collapsed whitespace, or empty string if invalid
    """
    if raw is None:
        return ""
    s = str(raw).strip()
    if not s:
        return ""
    return re.sub(r"\s+", " ", s).lower()


class Taxonomy(BaseModel):
    """Bloom taxonomy vocabularies plus the academic-level vocabulary."""

    levels: list[str] = Field(default_factory=list)  # Bloom taxa, in order
    verbs: dict[str, list[str]] = Field(default_factory=dict)  # taxon -> verbs
    assessments: dict[str, list[str]] = Field(default_factory=dict)  # taxon -> assessment plans
    instructions: dict[str, list[str]] = Field(default_factory=dict)  # taxon -> instructional strategies
    academic_levels: list[str] = Field(default_factory=lambda: [level.value for level in AcademicLevel])

    @model_validator(mode="after")
    def _validate(self) -> "Taxonomy":
        if not self.levels:
            raise ValueError("taxonomy must define at least one Bloom level")
        if len(set(self.levels)) != len(self.levels):
            raise ValueError(f"duplicate Bloom levels in taxonomy: {self.levels}")

        for table_name in ("verbs", "assessments", "instructions"):
            table: dict[str, list[str]] = getattr(self, table_name)
            missing = [level for level in self.levels if not table.get(level)]
            if missing:
                raise ValueError(f"taxonomy {table_name} has no entries for levels: {missing}")
            unknown = sorted(set(table) - set(self.levels))
            if unknown:
                raise ValueError(f"taxonomy {table_name} references unknown levels: {unknown}")

        if not self.academic_levels:
            raise ValueError("taxonomy must define at least one academic level")
        return self

    @cached_property
    def _level_set(self) -> frozenset[str]:
        return frozenset(self.levels)

    @cached_property
    def _academic_level_set(self) -> frozenset[str]:
        return frozenset(self.academic_levels)

    @cached_property
    def _lookup(self) -> dict[str, dict[str, frozenset[str]]]:
        """Build membership tables for each per-level vocabulary."""
        return {
            "verbs": {k: frozenset(v) for k, v in self.verbs.items()},
            "assessments": {k: frozenset(v) for k, v in self.assessments.items()},
            "instructions": {k: frozenset(v) for k, v in self.instructions.items()},
        }

    def _contains(self, table: str, level: object, term: object) -> bool:
        if not isinstance(level, str) or not isinstance(term, str):
            return False
        return term in self._lookup[table].get(level, frozenset())

    def has_level(self, level: object) -> bool:
        return isinstance(level, str) and level in self._level_set

    def has_verb(self, level: object, verb: object) -> bool:
        return self._contains("verbs", level, verb)

    def has_assessment(self, level: object, plan: object) -> bool:
        return self._contains("assessments", level, plan)

    def has_instruction(self, level: object, strategy: object) -> bool:
        return self._contains("instructions", level, strategy)

    def has_academic_level(self, level: object) -> bool:
        return isinstance(level, str) and level in self._academic_level_set

    def default_level(self) -> str:
        return self.levels[0]

    def default_verb(self, level: str) -> str:
        return self.verbs[level][0]

    def default_assessment(self, level: str) -> str:
        return self.assessments[level][0]

    def default_instruction(self, level: str) -> str:
        return self.instructions[level][0]
