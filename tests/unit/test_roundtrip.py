import json
from typing import Any

from domain.entities import LearningObject, LearningOutcome, StandardOutcome, User
from domain.schemas import LearningObjectLock, Metrics, Restriction


def _without_dates(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _without_dates(v) for k, v in value.items() if k != "date"}
    if isinstance(value, list):
        return [_without_dates(v) for v in value]
    return value


def _build_tree() -> LearningObject:
    author = User(id="u1", name="Ada", email="ada@example.edu", organization="State U", password="secret")
    root = LearningObject(author, "Discrete Math")
    root.length = "course"
    root.add_level("graduate")
    root.add_goal("Reason about sets")
    root.add_contributor(User(id="u2", name="Grace"))
    root.materials = {"notes": "see syllabus", "urls": [{"title": "Notes", "url": "https://example.edu/notes"}]}
    root.metrics = Metrics(saves=3, downloads=10)
    root.collection = "math"
    root.lock = LearningObjectLock(restrictions=[Restriction.DOWNLOAD, Restriction.FULL, Restriction.DOWNLOAD])

    outcome = LearningOutcome(root)
    outcome.bloom = "apply"
    outcome.verb = "solve"
    outcome.text = "recurrences"
    outcome.add_assessment().text = "problem set 3"
    outcome.add_strategy().text = "worked recurrences"
    outcome.map_to(StandardOutcome(author="ACM", name="DS/Sets", date="2013", outcome="use set notation"))
    outcome.extras = {"legacyScore": 2}
    root.add_outcome(outcome)
    root.add_outcome()

    child = LearningObject(author, "Sets")
    child.length = "module"
    child.add_goal("Union and intersection")
    child.add_outcome()
    grandchild = LearningObject(author, "Venn diagrams")
    child.add_child(grandchild)
    root.add_child(child)

    root.status = "published"
    return root


def _assert_same(a: LearningObject, b: LearningObject) -> None:
    assert b.name == a.name
    assert b.length == a.length
    assert b.status == a.status
    assert b.published == a.published
    assert b.date == a.date
    assert b.levels == a.levels
    assert [g.text for g in b.goals] == [g.text for g in a.goals]
    assert [o.tag for o in b.outcomes] == [o.tag for o in a.outcomes]
    assert len(b.children) == len(a.children)
    for child_a, child_b in zip(a.children, b.children):
        _assert_same(child_a, child_b)


def test_recursive_round_trip_through_json() -> None:
    original = _build_tree()

    restored = LearningObject.instantiate(json.loads(LearningObject.serialize(original)))

    _assert_same(original, restored)
    assert _without_dates(restored.to_dict()) == _without_dates(original.to_dict())


def test_unserialize_restores_owned_and_referenced_entities() -> None:
    restored = LearningObject.unserialize(LearningObject.serialize(_build_tree()))

    assert restored.author.name == "Ada"
    assert restored.author.password is None
    assert restored.contributors[0].name == "Grace"
    assert restored.goals[0].source is restored
    assert restored.metrics.downloads == 10
    assert restored.lock is not None
    assert restored.lock.restrictions == [Restriction.DOWNLOAD, Restriction.FULL]

    outcome = restored.outcomes[0]
    assert (outcome.bloom, outcome.verb, outcome.text) == ("apply", "solve", "recurrences")
    assert outcome.assessments[0].plan == "problem set"
    assert outcome.strategies[0].text == "worked recurrences"
    assert outcome.mappings[0] == StandardOutcome(author="ACM", name="DS/Sets", date="2013", outcome="use set notation")
    assert outcome.extras == {"legacyScore": 2}
    assert outcome.source is not None and outcome.source.name == "Discrete Math"


def test_payload_uses_camel_case_and_hides_password() -> None:
    data = _build_tree().to_dict()

    assert "password" not in data["author"]
    assert data["outcomes"][0]["assessments"][0]["sourceBloom"] == "apply"
    assert data["materials"]["folderDescriptions"] == []
    assert data["children"][0]["children"][0]["name"] == "Venn diagrams"
    assert data["published"] is True


def test_partial_payload_uses_defaults() -> None:
    obj = LearningObject.instantiate({"name": "  Draft  "})

    assert obj.name == "Draft"
    assert obj.levels == ("undergraduate",)
    assert obj.length.value == "nanomodule"
    assert obj.status.value == "unpublished"
    assert obj.author == User()


def test_unpublished_flag_survives_published_status() -> None:
    obj = LearningObject()
    obj.publish()
    obj.unpublish()

    restored = LearningObject.unserialize(LearningObject.serialize(obj))

    assert restored.status.value == "published"
    assert restored.published is False
