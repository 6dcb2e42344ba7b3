"""Bundled Bloom taxonomy vocabulary, used until another taxonomy is installed."""

from typing import Any

from domain.schemas import AcademicLevel
from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.model import Taxonomy

DEFAULT_TAXONOMY_CONFIG: dict[str, Any] = {
    "levels": {
        "remember": {
            "verbs": ["define", "describe", "identify", "label", "list", "name", "recall", "recognize", "state"],
            "assessments": ["multiple choice", "matching", "fill in the blank", "true/false", "short answer"],
            "instructions": ["lecture", "readings", "flash cards", "demonstration"],
        },
        "understand": {
            "verbs": ["classify", "compare", "discuss", "explain", "illustrate", "interpret", "paraphrase", "summarize"],
            "assessments": ["short answer", "essay", "concept map", "presentation"],
            "instructions": ["lecture", "discussion", "readings", "case study"],
        },
        "apply": {
            "verbs": ["apply", "calculate", "demonstrate", "execute", "implement", "operate", "solve", "use"],
            "assessments": ["problem set", "lab exercise", "demonstration", "simulation"],
            "instructions": ["lab", "practice exercise", "worked examples", "simulation"],
        },
        "analyze": {
            "verbs": ["analyze", "contrast", "deconstruct", "diagnose", "differentiate", "examine", "investigate", "organize"],
            "assessments": ["case study", "research paper", "essay", "lab report"],
            "instructions": ["case study", "discussion", "problem-based learning", "lab"],
        },
        "evaluate": {
            "verbs": ["assess", "critique", "defend", "evaluate", "judge", "justify", "prioritize", "recommend"],
            "assessments": ["debate", "peer review", "critique", "essay"],
            "instructions": ["debate", "peer review", "seminar", "case study"],
        },
        "create": {
            "verbs": ["construct", "create", "design", "develop", "formulate", "plan", "produce", "propose"],
            "assessments": ["project", "portfolio", "design document", "presentation"],
            "instructions": ["project", "collaborative design", "studio", "capstone"],
        },
    },
    "academic_levels": [level.value for level in AcademicLevel],
}


def default_taxonomy() -> Taxonomy:
    return parse_taxonomy_config(DEFAULT_TAXONOMY_CONFIG)
