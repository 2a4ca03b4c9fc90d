# tests/test_task_store.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tasklist.core.errors import IndexOutOfRange, StorageUnavailable
from tasklist.tasks import task_store
from tasklist.tasks.task_models import Task
from tasklist.tasks.task_store import TaskList

from .fakes import FailingWriteFile, write_tasks


def test_create_is_empty_and_does_no_io(tmp_path: Path) -> None:
    path = tmp_path / "never.json"
    tl = TaskList.create(path)
    assert len(tl) == 0
    assert tl.path == path
    assert not path.exists()


def test_load_reads_tasks_in_order(storage_path: Path) -> None:
    write_tasks(storage_path, "one", "two", "three")
    assert TaskList.load(storage_path).descriptions() == ["one", "two", "three"]


def test_load_ignores_unknown_fields(storage_path: Path) -> None:
    storage_path.write_text(
        '{"tasks":[{"description":"a","done":true}],"version":2}', encoding="utf-8"
    )
    assert TaskList.load(storage_path).descriptions() == ["a"]


def test_load_missing_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(StorageUnavailable):
        TaskList.load(tmp_path / "absent.json")


@pytest.mark.parametrize("content", [
    "",
    "not json",
    "[]",
    '{"items":[]}',
    '{"tasks":{}}',
    '{"tasks":["a"]}',
    '{"tasks":[{"description":1}]}',
    '{"tasks":[{}]}',
    pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
])
def test_load_malformed_content_resets_to_empty(
    storage_path: Path, content: str, caplog: pytest.LogCaptureFixture
) -> None:
    storage_path.write_text(content, encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="tasklist"):
        tl = TaskList.load(storage_path)
    assert len(tl) == 0
    assert tl.path == storage_path
    assert "failed to read" in caplog.text


def test_save_writes_compact_document(storage_path: Path) -> None:
    tl = TaskList(storage_path, [Task("buy milk"), Task("café")])
    tl.save()
    assert storage_path.read_text(encoding="utf-8") == (
        '{"tasks":[{"description":"buy milk"},{"description":"café"}]}'
    )


def test_save_truncates_longer_previous_content(storage_path: Path) -> None:
    write_tasks(storage_path, "a much longer description than the next one")
    tl = TaskList(storage_path, [Task("x")])
    tl.save()
    assert json.loads(storage_path.read_text(encoding="utf-8")) == {"tasks": [{"description": "x"}]}


def test_save_round_trip(storage_path: Path) -> None:
    tl = TaskList(storage_path, [Task("a"), Task(""), Task("with | pipe")])
    tl.save()
    assert TaskList.load(storage_path).descriptions() == ["a", "", "with | pipe"]


def test_save_never_creates_the_file(tmp_path: Path) -> None:
    path = tmp_path / "absent.json"
    with pytest.raises(StorageUnavailable):
        TaskList.create(path).save()
    assert not path.exists()


def test_save_serialization_failure_is_logged_not_raised(
    storage_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    write_tasks(storage_path, "old")

    def boom(tasks):
        raise TypeError("not serializable")

    monkeypatch.setattr(task_store, "_encode", boom)
    with caplog.at_level(logging.ERROR, logger="tasklist"):
        TaskList(storage_path, [Task("new")]).save()

    assert "problem saving tasks" in caplog.text
    # Truncated before serializing: the file is left empty.
    assert storage_path.read_text(encoding="utf-8") == ""


def test_add_appends_and_persists(storage_path: Path) -> None:
    tl = TaskList.load(storage_path)
    tl.add(Task("buy milk"))
    assert tl.descriptions() == ["buy milk"]
    assert TaskList.load(storage_path).descriptions() == ["buy milk"]


def test_remove_returns_task_and_persists(storage_path: Path) -> None:
    write_tasks(storage_path, "a", "b", "c")
    tl = TaskList.load(storage_path)
    assert tl.remove(0) == Task("a")
    assert TaskList.load(storage_path).descriptions() == ["b", "c"]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_remove_out_of_range_saves_then_raises(storage_path: Path, index: int) -> None:
    write_tasks(storage_path, "a", "b", "c")
    tl = TaskList.load(storage_path)
    storage_path.write_text("stale", encoding="utf-8")

    with pytest.raises(IndexOutOfRange) as exc:
        tl.remove(index)

    assert exc.value.index == index
    assert exc.value.size == 3
    assert tl.descriptions() == ["a", "b", "c"]
    # The save still ran and rewrote the file.
    assert TaskList.load(storage_path).descriptions() == ["a", "b", "c"]


@pytest.mark.parametrize("ops", [
    [("add", "a"), ("add", "b"), ("add", "c"), ("remove", 1), ("add", "d")],
    [("add", "a"), ("remove", 0), ("add", "b"), ("add", "c"), ("remove", 1)],
    [("add", "x"), ("add", "y"), ("add", "z"), ("remove", 2), ("remove", 0), ("remove", 0)],
])
def test_order_is_insertion_order_minus_removed(storage_path: Path, ops) -> None:
    tl = TaskList.load(storage_path)
    expected: list[str] = []
    for op, arg in ops:
        if op == "add":
            tl.add(Task(arg))
            expected.append(arg)
        else:
            tl.remove(arg)
            del expected[arg]
        assert tl.descriptions() == expected
    assert TaskList.load(storage_path).descriptions() == expected


def test_load_invalid_utf8_resets_to_empty(storage_path: Path) -> None:
    storage_path.write_bytes(b'{"tasks":[{"description":"\xff"}]}')
    assert len(TaskList.load(storage_path)) == 0


def test_load_directory_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(StorageUnavailable):
        TaskList.load(tmp_path)


def test_save_unencodable_description_is_logged_not_raised(
    storage_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    # surrogateescape-decoded stdin can leave lone surrogates in a description.
    with caplog.at_level(logging.ERROR, logger="tasklist"):
        TaskList(storage_path, [Task("bad\udcff")]).save()

    assert "problem saving tasks" in caplog.text
    assert storage_path.read_text(encoding="utf-8") == ""


def test_save_write_failure_is_logged_not_raised(
    storage_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: FailingWriteFile())

    with caplog.at_level(logging.ERROR, logger="tasklist"):
        TaskList(storage_path, [Task("a")]).save()

    assert "failed to flush" in caplog.text
