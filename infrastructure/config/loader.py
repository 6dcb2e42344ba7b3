"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from domain.taxonomy import Taxonomy, parse_taxonomy_config
from infrastructure.config.models import AppConfig, DocumentsConfig, LoggingConfig
from infrastructure.constants import ENV_LOG_FILE, ENV_LOG_LEVEL, ENV_TAXONOMY_FILE

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_taxonomy_config(path: Path) -> Taxonomy:
    """
    Load taxonomy from YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    taxonomy = parse_taxonomy_config(data)
    logger.debug("Loaded taxonomy from %s (%d Bloom levels)", path, len(taxonomy.levels))
    return taxonomy


def load_app_config(settings_path: Path | None = None) -> AppConfig:
    """
    Load settings.yaml (if present) and apply environment overrides.

    Precedence (highest first):
    - Environment: TAXONOMY_FILE, LOG_FILE, LOG_LEVEL (console level)
    - settings.yaml values
    - Model defaults

    An empty TAXONOMY_FILE disables the YAML taxonomy and keeps the bundled one.

    Raises:
        FileNotFoundError: If settings_path is given but does not exist
        ValueError: If the YAML or the resulting settings are invalid
    """
    raw: dict[str, Any] = _load_yaml(settings_path) if settings_path is not None else {}

    logging_raw = raw.get("logging") or {}
    documents_raw = raw.get("documents") or {}
    if not isinstance(logging_raw, dict) or not isinstance(documents_raw, dict):
        raise ValueError("settings 'logging' and 'documents' must be mappings")
    logging_raw = dict(logging_raw)

    if os.getenv(ENV_LOG_FILE):
        logging_raw["log_file"] = os.environ[ENV_LOG_FILE]
    if os.getenv(ENV_LOG_LEVEL):
        logging_raw["console_level"] = os.environ[ENV_LOG_LEVEL]

    kwargs: dict[str, Any] = {
        "logging": LoggingConfig(**logging_raw),
        "documents": DocumentsConfig(**documents_raw),
    }

    if ENV_TAXONOMY_FILE in os.environ:
        env_value = os.environ[ENV_TAXONOMY_FILE].strip()
        kwargs["taxonomy_file"] = Path(env_value) if env_value else None
    elif "taxonomy_file" in raw:
        kwargs["taxonomy_file"] = Path(raw["taxonomy_file"]) if raw["taxonomy_file"] else None

    return AppConfig(**kwargs)
