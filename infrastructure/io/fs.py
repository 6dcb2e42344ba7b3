"""Filesystem utility functions."""

from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists and is a regular file.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
        IsADirectoryError: If path is a directory
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Expected {what} file, found directory: {path}")


def ensure_parent_dir(path: Path) -> Path:
    """Create the parent directory of path if needed and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
