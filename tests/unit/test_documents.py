import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

import main
from application import (
    canonical_path,
    load_learning_objects,
    save_learning_objects,
    validate_document,
    validate_documents,
)
from domain.entities import LearningObject, LearningOutcome
from domain.errors import InvalidLevel
from infrastructure.constants import ENV_LOG_FILE, ENV_LOG_LEVEL, ENV_TAXONOMY_FILE


def _sample(name: str, text: str = "key terms") -> LearningObject:
    obj = LearningObject(name=name)
    outcome = LearningOutcome(obj)
    outcome.text = text
    outcome.add_assessment().text = "quiz"
    obj.add_outcome(outcome)
    return obj


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_save_and_load_single_object(tmp_path: Path) -> None:
    path = save_learning_objects([_sample("one")], tmp_path / "out" / "one.json")

    assert isinstance(json.loads(path.read_text(encoding="utf-8")), dict)
    (loaded,) = load_learning_objects(path)
    assert loaded.name == "one"
    assert loaded.outcomes[0].assessments[0].text == "quiz"


def test_load_list_and_wrapped_documents(tmp_path: Path) -> None:
    records = [_sample("a").to_dict(), _sample("b").to_dict()]
    as_list = _write(tmp_path / "list.json", records)
    wrapped = _write(tmp_path / "wrapped.json", {"learningObjects": records})

    assert [o.name for o in load_learning_objects(as_list)] == ["a", "b"]
    assert [o.name for o in load_learning_objects(wrapped)] == ["a", "b"]


def test_load_rejects_bad_documents(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_learning_objects(_write(tmp_path / "scalar.json", 3))
    with pytest.raises(InvalidLevel):
        load_learning_objects(_write(tmp_path / "level.json", {"levels": ["kindergarten"]}))
    with pytest.raises(FileNotFoundError):
        load_learning_objects(tmp_path / "missing.json")


def test_validate_collects_errors_per_object(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "mixed.json",
        [
            _sample("good").to_dict(),
            {"name": "bad level", "levels": ["kindergarten"]},
            {"name": 5},
            {"name": "bad length", "length": "semester"},
        ],
    )

    report = validate_document(path)

    assert not report.ok
    assert [o.name for o in report.objects] == ["good"]
    assert len(report.errors) == 3
    assert report.errors[0].startswith("object 1:")
    assert "invalid structure" in report.errors[1]
    assert report.outcome_count == 1


def test_validate_reports_unreadable_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    report = validate_document(path)

    assert not report.ok
    assert report.objects == []


def test_strict_mode_requires_outcome_text(tmp_path: Path) -> None:
    parent = _sample("parent")
    parent.add_child(_sample("child", text=""))
    path = _write(tmp_path / "draft.json", parent.to_dict())

    assert validate_document(path).ok
    strict = validate_document(path, strict_outcomes=True)
    assert not strict.ok
    assert len(strict.errors) == 1
    assert "child" in strict.errors[0]


def test_rewrite_writes_canonical_copy(tmp_path: Path) -> None:
    good = _write(tmp_path / "good.json", _sample("good").to_dict())
    bad = _write(tmp_path / "bad.json", {"length": "semester"})

    reports = validate_documents([good, bad], rewrite=True, indent=None)

    assert reports[0].written_to == canonical_path(good) == tmp_path / "good.canonical.json"
    assert load_learning_objects(reports[0].written_to)[0].name == "good"
    assert reports[1].written_to is None
    assert not canonical_path(bad).exists()


@pytest.fixture
def _restore_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (ENV_TAXONOMY_FILE, ENV_LOG_FILE, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_logging")
def test_main_exit_codes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_TAXONOMY_FILE, "")
    good = _write(tmp_path / "good.json", _sample("good").to_dict())
    bad = _write(tmp_path / "bad.json", {"status": "archived"})
    common = ["--settings", str(tmp_path / "none.yaml"), "--env", str(tmp_path / "none.env")]

    assert main.main([str(good), *common]) == 0
    assert main.main([str(good), str(bad), *common]) == 1


@pytest.mark.usefixtures("_restore_logging")
def test_main_with_taxonomy_file_and_log_file(tmp_path: Path) -> None:
    taxonomy = tmp_path / "taxonomy.yaml"
    taxonomy.write_text(
        "levels:\n"
        "  remember:\n"
        "    verbs: [define]\n"
        "    assessments: [quiz]\n"
        "    instructions: [lecture]\n",
        encoding="utf-8",
    )
    doc = _write(
        tmp_path / "doc.json",
        {
            "name": "custom",
            "outcomes": [
                {
                    "bloom": "remember",
                    "verb": "define",
                    "text": "terms",
                    "assessments": [{"sourceBloom": "remember", "plan": "quiz", "text": "weekly"}],
                }
            ],
        },
    )
    log_file = tmp_path / "logs" / "run.log"

    code = main.main(
        [
            str(doc),
            "--settings",
            str(tmp_path / "none.yaml"),
            "--env",
            str(tmp_path / "none.env"),
            "--taxonomy",
            str(taxonomy),
            "--log-file",
            str(log_file),
            "--strict",
            "--rewrite",
        ]
    )

    assert code == 0
    assert canonical_path(doc).exists()
    assert log_file.exists()
    assert "Validation Summary" in log_file.read_text(encoding="utf-8")
