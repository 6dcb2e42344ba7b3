"""Helpers shared by the entity classes."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
P = TypeVar("P", bound=BaseModel)


def splice_one(items: list[T], index: int) -> T | None:
    """
    Remove and return the element at index, with splice semantics.

    A negative index counts from the end and is clamped to the start; an index
    past the end removes nothing. Never raises for an out-of-range index.

    Examples:
        >>> splice_one(["a", "b", "c"], -1)
        'c'
        >>> splice_one(["a", "b"], -10)
        'a'
        >>> splice_one(["a"], 5) is None
        True
    """
    n = len(items)
    if index < 0:
        index = max(n + index, 0)
    if index >= n:
        return None
    return items.pop(index)


def as_payload(model_cls: type[P], data: P | Mapping[str, Any]) -> P:
    """Validate a plain mapping (e.g. from json.loads) into a payload model."""
    if isinstance(data, model_cls):
        return data
    return model_cls.model_validate(data)


def plain(value: object) -> object:
    """Unwrap enum members to their value so membership tests see plain strings."""
    if isinstance(value, Enum):
        return value.value
    return value
