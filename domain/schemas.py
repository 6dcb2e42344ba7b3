"""Pydantic models for the JSON payloads and attached value objects of the entity graph."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Length(str, Enum):
    """Learning object lengths, smallest first."""

    NANOMODULE = "nanomodule"
    MICROMODULE = "micromodule"
    MODULE = "module"
    UNIT = "unit"
    COURSE = "course"


class Status(str, Enum):
    """Review states of a learning object."""

    UNPUBLISHED = "unpublished"
    WAITING = "waiting"
    REVIEWED = "reviewed"
    PUBLISHED = "published"
    DENIED = "denied"


class Restriction(str, Enum):
    """Kinds of restriction a lock can place on a learning object."""

    FULL = "full"
    PUBLISH = "publish"
    DOWNLOAD = "download"


class AcademicLevel(str, Enum):
    """Default academic-level vocabulary."""

    ELEMENTARY = "elementary"
    MIDDLE = "middle"
    HIGH = "high"
    UNDERGRADUATE = "undergraduate"
    GRADUATE = "graduate"
    POST_GRADUATE = "post graduate"
    COMMUNITY_COLLEGE = "community college"
    TRAINING = "training"


class CamelModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Value objects attached to a learning object ----


class FileAsset(CamelModel):
    id: str = ""
    name: str = ""
    file_type: str = ""
    extension: str = ""
    url: str = ""
    date: str = ""
    full_path: str | None = None
    size: int | None = None
    description: str | None = None


class Url(CamelModel):
    title: str = ""
    url: str = ""


class FolderDescription(CamelModel):
    path: str = ""
    description: str = ""


class LearningObjectPDF(CamelModel):
    name: str = ""
    url: str = ""


class Material(CamelModel):
    """Files, links and notes attached to a learning object. Not validated."""

    files: list[FileAsset] = Field(default_factory=list)
    urls: list[Url] = Field(default_factory=list)
    notes: str = ""
    folder_descriptions: list[FolderDescription] = Field(default_factory=list)
    pdf: LearningObjectPDF = Field(default_factory=LearningObjectPDF)


class Metrics(CamelModel):
    saves: int = 0
    downloads: int = 0


class LearningObjectLock(CamelModel):
    """Restriction record: optional expiry date plus an ordered set of restrictions."""

    date: str | None = None
    restrictions: list[Restriction] = Field(default_factory=list)

    @field_validator("restrictions")
    @classmethod
    def _unique_restrictions(cls, value: list[Restriction]) -> list[Restriction]:
        seen: list[Restriction] = []
        for restriction in value:
            if restriction not in seen:
                seen.append(restriction)
        return seen


# ---- Entity payloads ----


class UserPayload(CamelModel):
    id: str = ""
    name: str = ""
    email: str = ""
    organization: str = ""


class LearningGoalPayload(CamelModel):
    text: str | None = ""


class StandardOutcomePayload(CamelModel):
    author: str | None = ""
    name: str | None = ""
    date: str | None = ""
    outcome: str | None = ""


class AssessmentPlanPayload(CamelModel):
    source_bloom: str | None = None
    plan: str | None = None
    text: str | None = ""


class InstructionalStrategyPayload(CamelModel):
    source_bloom: str | None = None
    strategy: str | None = None
    text: str | None = ""


class LearningOutcomePayload(CamelModel):
    """Outcome payload. Keys not declared here are kept as extras; missing fields keep entity defaults."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str | None = None
    tag: int | None = None
    bloom: str | None = None
    verb: str | None = None
    text: str = ""
    mappings: list[StandardOutcomePayload] = Field(default_factory=list)
    assessments: list[AssessmentPlanPayload] = Field(default_factory=list)
    strategies: list[InstructionalStrategyPayload] = Field(default_factory=list)


class LearningObjectPayload(CamelModel):
    author: UserPayload | None = None
    name: str | None = None
    date: datetime | None = None
    length: str | None = None
    levels: list[str] | None = None
    goals: list[LearningGoalPayload] = Field(default_factory=list)
    outcomes: list[LearningOutcomePayload] = Field(default_factory=list)
    materials: Material | None = None
    metrics: Metrics | None = None
    children: list["LearningObjectPayload"] = Field(default_factory=list)
    contributors: list[UserPayload] = Field(default_factory=list)
    collection: str | None = None
    status: str | None = None
    published: bool = False
    lock: LearningObjectLock | None = None

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
