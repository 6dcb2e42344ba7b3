"""Learning-object document loading and serialization."""

import logging
from pathlib import Path
from typing import Any

from application.constants import CANONICAL_SUFFIX, LEARNING_OBJECTS_KEY
from domain.entities import LearningObject
from infrastructure.io import read_json, write_json

logger = logging.getLogger(__name__)


def iter_object_payloads(data: Any) -> list[dict[str, Any]]:
    """
    Return the learning-object payloads held by a parsed JSON document.

    A document is either a single learning object, a list of them, or a
    mapping with a "learningObjects" list.

    Raises:
        ValueError: If the document has none of these shapes
    """
    if isinstance(data, dict) and LEARNING_OBJECTS_KEY in data:
        data = data[LEARNING_OBJECTS_KEY]
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return list(data)
    raise ValueError(
        f"Expected a learning object, a list of learning objects or a '{LEARNING_OBJECTS_KEY}' mapping, "
        f"got {type(data).__name__}"
    )


def load_learning_objects(path: Path) -> list[LearningObject]:
    """
    Load every learning object in a JSON document.

    Each object is rebuilt through LearningObject.instantiate, so the whole
    graph is re-validated against the active taxonomy.

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the JSON is malformed, has the wrong shape
            (pydantic.ValidationError) or fails entity validation (EntityError)
    """
    payloads = iter_object_payloads(read_json(path))
    objects = [LearningObject.instantiate(payload) for payload in payloads]
    logger.debug("Loaded %d learning object(s) from %s", len(objects), path)
    return objects


def save_learning_objects(objects: list[LearningObject], path: Path, indent: int | None = 2) -> Path:
    """
    Write learning objects in canonical form.

    A single object is written as a bare JSON object, several as a list.
    """
    records = [obj.to_dict() for obj in objects]
    data: Any = records[0] if len(records) == 1 else records
    write_json(data, path, indent=indent)
    logger.info("Saved %d learning object(s) to %s", len(records), path)
    return path


def canonical_path(path: Path) -> Path:
    """Path of the canonical copy written next to a source document."""
    return path.with_name(path.stem + CANONICAL_SUFFIX)
