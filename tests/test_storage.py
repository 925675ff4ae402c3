"""Tests for memory and JSON-file storage."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from vega_themes.storage import (
    COLOR_SET_KEY,
    THEME_KEY,
    JsonFileStorage,
    MemoryStorage,
)


# ---------------------------------------------------------------------------
# Unit: MemoryStorage
# ---------------------------------------------------------------------------


class TestMemoryStorage:
    def test_get_missing(self) -> None:
        assert MemoryStorage().get(THEME_KEY) is None

    def test_set_and_get(self) -> None:
        storage = MemoryStorage()
        storage.set(THEME_KEY, "dark")
        assert storage.get(THEME_KEY) == "dark"

    def test_initial_values_are_copied(self) -> None:
        initial = {THEME_KEY: "neon"}
        storage = MemoryStorage(initial)
        initial[THEME_KEY] = "light"
        assert storage.get(THEME_KEY) == "neon"

    def test_remove(self) -> None:
        storage = MemoryStorage({COLOR_SET_KEY: "status"})
        storage.remove(COLOR_SET_KEY)
        storage.remove(COLOR_SET_KEY)
        assert storage.as_dict() == {}


# ---------------------------------------------------------------------------
# Unit: JsonFileStorage
# ---------------------------------------------------------------------------


class TestJsonFileStorage:
    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        storage = JsonFileStorage(tmp_path / "state.json")
        assert storage.get(THEME_KEY) is None

    def test_set_writes_json(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        JsonFileStorage(path).set(THEME_KEY, "retro")
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "retro"}

    def test_values_survive_new_instance(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        first = JsonFileStorage(path)
        first.set(THEME_KEY, "dark")
        first.set(COLOR_SET_KEY, "priority")
        second = JsonFileStorage(path)
        assert second.get(THEME_KEY) == "dark"
        assert second.get(COLOR_SET_KEY) == "priority"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "state.json"
        JsonFileStorage(path).set(THEME_KEY, "light")
        assert path.exists()

    def test_remove_deletes_key(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        storage = JsonFileStorage(path)
        storage.set(THEME_KEY, "dark")
        storage.set(COLOR_SET_KEY, "status")
        storage.remove(COLOR_SET_KEY)
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}

    def test_remove_missing_does_not_create_file(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        JsonFileStorage(path).remove(COLOR_SET_KEY)
        assert not path.exists()

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        storage = JsonFileStorage(tmp_path / "state.json")
        storage.set(THEME_KEY, "dark")
        storage.set(THEME_KEY, "neon")
        assert os.listdir(tmp_path) == ["state.json"]

    def test_corrupt_file_reads_empty(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonFileStorage(path).get(THEME_KEY) is None
        assert "Ignoring unreadable state file" in caplog.text

    def test_corrupt_file_is_replaced_on_write(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("[1, 2]", encoding="utf-8")
        JsonFileStorage(path).set(THEME_KEY, "fluent")
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "fluent"}

    def test_non_string_value_reads_none(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text('{"theme": 3}', encoding="utf-8")
        assert JsonFileStorage(path).get(THEME_KEY) is None

    def test_write_failure_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        storage = JsonFileStorage(blocker / "state.json")
        with pytest.raises(OSError):
            storage.set(THEME_KEY, "dark")
