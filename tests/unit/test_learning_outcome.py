import pytest

from domain.entities import (
    AssessmentPlan,
    LearningObject,
    LearningOutcome,
    Outcome,
    StandardOutcome,
    SubmittableAssessmentPlan,
    SubmittableLearningOutcome,
    User,
)
from domain.errors import InvalidBloom, InvalidText, InvalidVerb


def _with_tags(*tags: int) -> LearningObject:
    obj = LearningObject()
    for tag in tags:
        obj.add_outcome(LearningOutcome.instantiate(obj, {"tag": tag, "bloom": "remember", "verb": "define"}))
    return obj


def test_defaults_come_from_taxonomy() -> None:
    outcome = LearningOutcome()

    assert outcome.bloom == "remember"
    assert outcome.verb == "define"
    assert outcome.text == ""
    assert outcome.tag == 0
    assert outcome.source is None
    assert outcome.id is None


@pytest.mark.parametrize(
    "tags, expected",
    [
        ((), 0),
        ((0, 1, 2), 3),
        ((0, 1, 3), 2),
        ((1, 0), 2),
        ((2, 1, 0), 3),
        ((5,), 0),
    ],
)
def test_new_tag_is_smallest_free(tags: tuple[int, ...], expected: int) -> None:
    assert LearningOutcome(_with_tags(*tags)).tag == expected


def test_source_is_a_snapshot() -> None:
    obj = LearningObject(User(name="Ada"), "Sets")
    outcome = LearningOutcome(obj)
    obj.name = "Renamed"

    assert outcome.source is not None
    assert outcome.source.name == "Sets"
    assert outcome.source.date < obj.date
    assert outcome.author == "Ada"
    assert outcome.name == "Sets"


def test_invalid_verb_for_remember_keeps_verb() -> None:
    outcome = LearningOutcome()
    outcome.bloom = "remember"

    with pytest.raises(InvalidVerb):
        outcome.verb = "design"

    assert outcome.verb == "define"


def test_verb_is_not_revalidated_when_bloom_changes() -> None:
    outcome = LearningOutcome()
    outcome.verb = "recall"

    outcome.bloom = "create"

    assert outcome.verb == "recall"
    with pytest.raises(InvalidVerb):
        outcome.verb = "recall"
    outcome.verb = "design"
    assert outcome.outcome == "design "


def test_invalid_bloom_is_rejected() -> None:
    outcome = LearningOutcome()

    with pytest.raises(InvalidBloom):
        outcome.bloom = "memorize"

    assert outcome.bloom == "remember"


def test_text_is_trimmed_and_none_rejected() -> None:
    outcome = LearningOutcome()
    outcome.text = "  the parts of a cell "
    assert outcome.text == "the parts of a cell"
    assert outcome.outcome == "define the parts of a cell"

    with pytest.raises(InvalidText):
        outcome.text = None  # type: ignore[assignment]
    assert outcome.text == "the parts of a cell"


def test_children_take_bloom_snapshot() -> None:
    outcome = LearningOutcome()
    plan = outcome.add_assessment()
    outcome.bloom = "apply"
    strategy = outcome.add_strategy()

    assert isinstance(plan, AssessmentPlan)
    assert plan.source_bloom == "remember"
    assert plan.plan == "multiple choice"
    assert strategy.source_bloom == "apply"
    assert strategy.strategy == "lab"
    assert outcome.assessments == (plan,)

    assert outcome.remove_assessment(0) is plan
    assert outcome.remove_strategy(3) is None
    assert outcome.strategies == (strategy,)


def test_mappings_are_references_and_allow_duplicates() -> None:
    outcome = LearningOutcome()
    standard = StandardOutcome(author="ABET", name="Outcome 1", date="2019", outcome="solve problems")

    assert outcome.map_to(standard) == 0
    assert outcome.map_to(standard) == 1
    assert outcome.mappings[0] is standard

    assert outcome.unmap(0) is standard
    assert outcome.mappings == (standard,)


def test_learning_outcomes_can_be_mapped() -> None:
    other_obj = LearningObject(User(name="Grace"), "Algebra")
    other = LearningOutcome(other_obj)
    other.text = "variables"
    outcome = LearningOutcome()

    outcome.map_to(other)
    mapping = outcome.to_dict()["mappings"][0]

    assert isinstance(other, Outcome)
    assert mapping["author"] == "Grace"
    assert mapping["name"] == "Algebra"
    assert mapping["outcome"] == "define variables"
    assert mapping["date"] == other_obj.date.isoformat()


def test_instantiate_restores_without_setter_validation() -> None:
    outcome = LearningOutcome.instantiate(
        None,
        {"id": "o-1", "tag": 4, "bloom": "create", "verb": "define", "text": "  kept as is "},
    )

    assert outcome.id == "o-1"
    assert outcome.tag == 4
    assert outcome.verb == "define"
    assert outcome.text == "  kept as is "


def test_unknown_keys_are_preserved() -> None:
    payload = {"bloom": "remember", "verb": "list", "text": "the planets", "legacyScore": 7, "reviewer": {"id": "u1"}}

    outcome = LearningOutcome.instantiate(None, payload)
    data = outcome.to_dict()

    assert outcome.extras == {"legacyScore": 7, "reviewer": {"id": "u1"}}
    assert data["legacyScore"] == 7
    assert data["reviewer"] == {"id": "u1"}
    assert data["verb"] == "list"


def test_serialize_round_trip() -> None:
    outcome = LearningOutcome()
    outcome.text = "terms"
    outcome.add_assessment().text = "weekly quiz"
    outcome.map_to(StandardOutcome(author="CSTA", name="1A", date="2017", outcome="model data"))

    restored = LearningOutcome.unserialize(LearningOutcome.serialize(outcome), None)

    assert restored.to_dict() == outcome.to_dict()
    assert restored.mappings[0] == outcome.mappings[0]


def test_submittable_rejects_blank_text() -> None:
    outcome = SubmittableLearningOutcome()

    with pytest.raises(InvalidText):
        outcome.text = "   "

    outcome.text = " ready "
    assert outcome.text == "ready"
    assert isinstance(outcome.add_assessment(), SubmittableAssessmentPlan)


def test_promoting_outcome_checks_every_text() -> None:
    obj = LearningObject(name="Cells")
    outcome = LearningOutcome(obj)
    outcome.text = "organelles"
    plan = outcome.add_assessment()

    with pytest.raises(InvalidText):
        SubmittableLearningOutcome.from_outcome(outcome)

    plan.text = "lab practical"
    standard = StandardOutcome(author="NGSS", name="LS1", date="2013", outcome="cells")
    outcome.map_to(standard)

    promoted = SubmittableLearningOutcome.from_outcome(outcome)

    assert promoted.text == "organelles"
    assert promoted.source == outcome.source
    assert promoted.mappings[0] is standard
    assert promoted.assessments[0].text == "lab practical"


def test_promoting_blank_outcome_fails() -> None:
    with pytest.raises(InvalidText):
        SubmittableLearningOutcome.from_outcome(LearningOutcome())


def test_untagged_outcomes_get_distinct_tags_on_load() -> None:
    obj = LearningObject.instantiate(
        {"outcomes": [{"bloom": "remember", "verb": "define"}, {"bloom": "remember", "verb": "list"}]}
    )

    assert [o.tag for o in obj.outcomes] == [0, 1]


def test_stored_tags_are_kept_next_to_untagged_ones() -> None:
    obj = LearningObject.instantiate({"outcomes": [{"tag": 0}, {}, {"tag": 5}]})

    assert [o.tag for o in obj.outcomes] == [0, 1, 5]


def test_partial_outcome_payload_uses_defaults() -> None:
    outcome = LearningOutcome.instantiate(None, {"text": "the planets"})

    assert (outcome.tag, outcome.bloom, outcome.verb) == (0, "remember", "define")
    assert outcome.text == "the planets"
    assert outcome.extras == {}


def test_missing_verb_follows_restored_bloom() -> None:
    outcome = LearningOutcome.instantiate(None, {"bloom": "create"})

    assert outcome.bloom == "create"
    assert outcome.verb == "construct"
