"""Parse taxonomy configuration from YAML dict."""

from typing import Any

from domain.taxonomy.model import Taxonomy, normalize_term

_TABLES = ("verbs", "assessments", "instructions")


def _terms(value: Any, where: str) -> list[str]:
    if not isinstance(value, list):
        raise ValueError(f"{where} must be a list")
    out: list[str] = []
    for raw in value:
        term = normalize_term(raw)
        if term and term not in out:
            out.append(term)
    return out


def parse_taxonomy_config(data: dict[str, Any]) -> Taxonomy:
    """
    Parse pre-loaded YAML dict into Taxonomy object.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Expected shape:
        levels:
          remember:
            verbs: [define, list, ...]
            assessments: [multiple choice, ...]
            instructions: [lecture, ...]
        academic_levels: [elementary, ...]   # optional

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        Taxonomy object with normalized terms

    Raises:
        ValueError: If required keys are missing or have wrong types
    """
    levels_raw = data.get("levels", {}) or {}
    if not isinstance(levels_raw, dict):
        raise ValueError("levels must be a mapping")

    levels: list[str] = []
    tables: dict[str, dict[str, list[str]]] = {name: {} for name in _TABLES}
    for raw_level, block in levels_raw.items():
        level = normalize_term(raw_level)
        if not level:
            raise ValueError(f"invalid Bloom level key: {raw_level!r}")
        if not isinstance(block, dict):
            raise ValueError(f"levels.{level} must be a mapping")
        levels.append(level)
        for name in _TABLES:
            tables[name][level] = _terms(block.get(name, []) or [], f"levels.{level}.{name}")

    kwargs: dict[str, Any] = {"levels": levels, **tables}
    if "academic_levels" in data:
        kwargs["academic_levels"] = _terms(data.get("academic_levels") or [], "academic_levels")

    return Taxonomy(**kwargs)
