"""Read-only view shared by standard outcomes and learning outcomes."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Outcome(Protocol):
    """Anything a learning outcome can be mapped to."""

    @property
    def author(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def date(self) -> str: ...

    @property
    def outcome(self) -> str: ...
