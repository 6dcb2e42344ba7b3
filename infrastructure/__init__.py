"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- JSON document files
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    AppConfig,
    load_app_config,
    load_taxonomy_config,
)
from infrastructure.io import read_json, write_json

__all__ = [
    # Configuration (most commonly used)
    "load_app_config",
    "load_taxonomy_config",
    "AppConfig",
    # Documents
    "read_json",
    "write_json",
]
