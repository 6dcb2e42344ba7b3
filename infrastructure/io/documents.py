"""JSON document reading and writing."""

import json
from pathlib import Path
from typing import Any

from infrastructure.io.fs import ensure_exists, ensure_parent_dir


def read_json(path: Path) -> Any:
    """
    Read a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the file is not valid JSON (json.JSONDecodeError)
    """
    ensure_exists(path, "document")

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(data: Any, path: Path, indent: int | None = 2) -> Path:
    """Write data as UTF-8 JSON, creating parent directories as needed."""
    with ensure_parent_dir(path).open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)
        if indent is not None:
            f.write("\n")
    return path
