"""Process-wide active taxonomy consulted by the entities."""

from collections.abc import Iterator
from contextlib import contextmanager

from domain.taxonomy.defaults import default_taxonomy
from domain.taxonomy.model import Taxonomy

_ACTIVE: Taxonomy | None = None


def get_taxonomy() -> Taxonomy:
    """Return the active taxonomy, installing the bundled default on first use."""
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = default_taxonomy()
    return _ACTIVE


def set_taxonomy(taxonomy: Taxonomy | None) -> None:
    """Install a taxonomy for all subsequent validation. None restores the default."""
    global _ACTIVE
    _ACTIVE = taxonomy


@contextmanager
def use_taxonomy(taxonomy: Taxonomy) -> Iterator[Taxonomy]:
    """Temporarily install a taxonomy, restoring the previous one on exit."""
    global _ACTIVE
    previous = _ACTIVE
    _ACTIVE = taxonomy
    try:
        yield taxonomy
    finally:
        _ACTIVE = previous
