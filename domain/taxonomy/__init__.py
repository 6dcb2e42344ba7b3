"""
Taxonomy management: vocabularies, parsing, and the active taxonomy.

The taxonomy is the oracle the entities query by membership: Bloom levels,
verbs per level, assessment plans per level, instructional strategies per
level, and academic levels. All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.defaults import DEFAULT_TAXONOMY_CONFIG, default_taxonomy
from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.model import Taxonomy, normalize_term
from domain.taxonomy.registry import get_taxonomy, set_taxonomy, use_taxonomy

__all__ = [
    "Taxonomy",
    "normalize_term",
    "parse_taxonomy_config",
    "DEFAULT_TAXONOMY_CONFIG",
    "default_taxonomy",
    "get_taxonomy",
    "set_taxonomy",
    "use_taxonomy",
]
