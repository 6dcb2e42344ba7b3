"""I/O utilities: filesystem checks and JSON documents."""

from infrastructure.io.documents import read_json, write_json
from infrastructure.io.fs import ensure_exists, ensure_parent_dir

__all__ = [
    "ensure_exists",
    "ensure_parent_dir",
    "read_json",
    "write_json",
]
