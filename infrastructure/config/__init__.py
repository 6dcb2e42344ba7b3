"""
Configuration management: models, loading, and validation.

Handles:
- AppConfig: Taxonomy location, logging and document settings
- Taxonomy loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_app_config, load_taxonomy_config
from infrastructure.config.models import AppConfig, DocumentsConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "DocumentsConfig",
    "load_app_config",
    "load_taxonomy_config",
]
