"""User entity: author and contributor identity record."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from domain.entities.base import as_payload
from domain.schemas import UserPayload


@dataclass
class User:
    """
    Author/contributor identity.

    Business Rules:
    - No validation beyond presence of the fields
    - The credential is a placeholder and is never written to payloads
    """

    id: str = ""
    name: str = ""
    email: str = ""
    organization: str = ""
    password: str | None = field(default=None, repr=False)

    def to_payload(self) -> UserPayload:
        return UserPayload(id=self.id, name=self.name, email=self.email, organization=self.organization)

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump(mode="json", by_alias=True)

    @classmethod
    def instantiate(cls, payload: UserPayload | Mapping[str, Any]) -> "User":
        data = as_payload(UserPayload, payload)
        return cls(id=data.id, name=data.name, email=data.email, organization=data.organization)

    @staticmethod
    def serialize(entity: "User") -> str:
        return entity.to_payload().model_dump_json(by_alias=True)

    @classmethod
    def unserialize(cls, msg: str) -> "User":
        return cls.instantiate(UserPayload.model_validate_json(msg))
