"""
CLI entrypoint for learning-object document validation.

This script performs the following steps:
- loads .env and configs/settings.yaml
- installs the taxonomy from configs/taxonomy.yaml (or the bundled default)
- configures console and optional rotating file logging
- rebuilds every learning object in the given JSON documents, re-running all validation
- optionally checks that every outcome is ready for submission
- optionally writes a canonical copy of each valid document
- logs a human-readable summary and exits non-zero if any document failed
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import log_validation_summary, validate_documents
from domain.taxonomy import set_taxonomy
from infrastructure.config import load_app_config, load_taxonomy_config
from infrastructure.constants import SETTINGS_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate learning-object JSON documents")
    p.add_argument("documents", nargs="+", type=Path, help="JSON documents to validate")
    p.add_argument(
        "--settings",
        type=str,
        default=str(SETTINGS_FILE),
        help="Path to settings.yaml (default: configs/settings.yaml; skipped if missing)",
    )
    p.add_argument(
        "--taxonomy",
        type=str,
        default=None,
        help="Path to a taxonomy YAML file (overrides settings and TAXONOMY_FILE)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument("--console-level", type=str, default=None, choices=_LEVELS, help="Console log level")
    p.add_argument("--file-level", type=str, default=None, choices=_LEVELS, help="File log level")
    p.add_argument("--log-file", type=str, default=None, help="Rotating log file (default: console only)")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Also require every outcome, assessment plan and strategy to have non-empty text.",
    )
    p.add_argument(
        "--rewrite",
        action="store_true",
        help="Write <name>.canonical.json next to each valid document.",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    settings_path = Path(args.settings)
    cfg = load_app_config(settings_path if settings_path.exists() else None)

    log_cfg = cfg.logging
    configure_logging(
        log_file=Path(args.log_file) if args.log_file else log_cfg.log_file,
        console_level=getattr(logging, args.console_level) if args.console_level else log_cfg.console_level_no,
        file_level=getattr(logging, args.file_level) if args.file_level else log_cfg.file_level_no,
        max_bytes=log_cfg.max_bytes,
        backup_count=log_cfg.backup_count,
    )

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_validate"
    set_log_context(run_id_full=run_id)
    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    taxonomy_path = Path(args.taxonomy) if args.taxonomy else cfg.taxonomy_file
    if taxonomy_path is not None:
        ensure_exists(taxonomy_path, "taxonomy.yaml")
        taxonomy = load_taxonomy_config(taxonomy_path)
        set_taxonomy(taxonomy)
        logger.info("Taxonomy loaded from %s (%d Bloom levels)", taxonomy_path, len(taxonomy.levels))
    else:
        set_taxonomy(None)
        logger.info("Using bundled taxonomy")

    strict = args.strict or cfg.documents.strict_outcomes
    reports = validate_documents(
        list(args.documents),
        strict_outcomes=strict,
        rewrite=args.rewrite,
        indent=cfg.documents.indent,
    )

    log_validation_summary(reports)
    return 0 if all(report.ok for report in reports) else 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
