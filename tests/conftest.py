from collections.abc import Iterator

import pytest

from domain.taxonomy import Taxonomy, parse_taxonomy_config, set_taxonomy


@pytest.fixture(autouse=True)
def _reset_taxonomy() -> Iterator[None]:
    set_taxonomy(None)
    yield
    set_taxonomy(None)


@pytest.fixture
def small_taxonomy() -> Taxonomy:
    return parse_taxonomy_config(
        {
            "levels": {
                "Recall": {
                    "verbs": ["list", "name"],
                    "assessments": ["quiz"],
                    "instructions": ["lecture"],
                },
                "Build": {
                    "verbs": ["build"],
                    "assessments": ["project", "demo"],
                    "instructions": ["studio"],
                },
            },
            "academic_levels": ["primary", "secondary"],
        }
    )
