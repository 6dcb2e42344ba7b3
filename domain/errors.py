"""
Entity validation errors.

Every error is raised at the point of assignment, before any state changes,
so a caught error always means the attempted mutation did not take effect.
"""


class EntityError(ValueError):
    """Base class for all entity validation failures."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidName(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("Learning object name must be a string", value)


class InvalidText(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("Text must be a non-empty string", value)


class InvalidLength(EntityError):
    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a valid learning object length", value)


class InvalidStatus(EntityError):
    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a valid learning object status", value)


class InvalidBloom(EntityError):
    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a valid Bloom taxon", value)


class InvalidVerb(EntityError):
    def __init__(self, bloom: str, value: object) -> None:
        super().__init__(f"{value!r} is not a valid verb for the {bloom} taxon", value)
        self.bloom = bloom


class InvalidPlanKind(EntityError):
    def __init__(self, bloom: str, value: object, kind: str = "assessment plan") -> None:
        super().__init__(f"{value!r} is not a valid {kind} for the {bloom} taxon", value)
        self.bloom = bloom
        self.kind = kind


class InvalidLevel(EntityError):
    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a valid academic level", value)


class LevelAlreadyExists(EntityError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Academic level {value!r} has already been added", value)


class InvalidLevels(EntityError):
    def __init__(self) -> None:
        super().__init__("A learning object must keep at least one academic level")


InvalidLevelsEmpty = InvalidLevels


class InvalidChild(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("A learning object cannot contain itself as a descendant", value)


# StandardOutcome fields


class InvalidAuthor(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("Standard outcome author must be a non-empty string", value)


class InvalidOutcomeName(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("Standard outcome name must be a non-empty string", value)


class InvalidDate(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("Standard outcome date must be a non-empty string", value)


class InvalidOutcomeText(EntityError):
    def __init__(self, value: object = None) -> None:
        super().__init__("Standard outcome text must be a non-empty string", value)
