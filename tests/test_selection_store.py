"""Tests for persisting the custom question selection."""

from __future__ import annotations

import json
from pathlib import Path

from study_quiz.core.services.selection_store import (
    InMemorySelectionStore,
    JsonFileSelectionStore,
    unique_in_order,
)


class TestJsonFileSelectionStore:
    """Tests for the JSON file backed store."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = JsonFileSelectionStore(tmp_path / "selection.json")
        assert store.load() == []

    def test_save_then_load(self, tmp_path: Path) -> None:
        store = JsonFileSelectionStore(tmp_path / "nested" / "selection.json")
        store.save(["alpha_1", "beta_0"])
        assert store.load() == ["alpha_1", "beta_0"]

    def test_saved_document_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "selection.json"
        JsonFileSelectionStore(path).save(["alpha_1"])
        assert json.loads(path.read_text(encoding="utf-8")) == {"selectedQuestionIds": ["alpha_1"]}

    def test_duplicates_are_dropped(self, tmp_path: Path) -> None:
        store = JsonFileSelectionStore(tmp_path / "selection.json")
        store.save(["a_1", "b_2", "a_1"])
        assert store.load() == ["a_1", "b_2"]

    def test_malformed_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "selection.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonFileSelectionStore(path).load() == []

    def test_invalid_utf8_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "selection.json"
        path.write_bytes(b'{"selectedQuestionIds": ["a\xff"]}')
        assert JsonFileSelectionStore(path).load() == []

    def test_wrong_shape_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "selection.json"
        path.write_text(json.dumps({"selectedQuestionIds": "alpha_1"}), encoding="utf-8")
        assert JsonFileSelectionStore(path).load() == []

    def test_duplicates_in_file_are_dropped(self, tmp_path: Path) -> None:
        path = tmp_path / "selection.json"
        path.write_text(json.dumps({"selectedQuestionIds": ["x_1", "x_1", "y_0"]}), encoding="utf-8")
        assert JsonFileSelectionStore(path).load() == ["x_1", "y_0"]


class TestInMemorySelectionStore:
    def test_load_returns_copy(self) -> None:
        store = InMemorySelectionStore(["a_0"])
        loaded = store.load()
        loaded.append("b_0")
        assert store.load() == ["a_0"]


def test_unique_in_order() -> None:
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
