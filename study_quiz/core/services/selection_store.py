"""Storage for the user's custom question selection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from study_quiz.constants.storage_constants import SELECTION_RECORD_KEY

logger = logging.getLogger(__name__)


class SelectionStore(Protocol):
    """Read/write access to the persisted custom selection."""

    def load(self) -> list[str]: ...

    def save(self, question_ids: Iterable[str]) -> None: ...


class CustomSelectionRecord(BaseModel):
    """Shape of the persisted record."""

    model_config = ConfigDict(populate_by_name=True)

    selected_question_ids: list[str] = Field(default_factory=list, alias=SELECTION_RECORD_KEY)


def unique_in_order(question_ids: Iterable[str]) -> list[str]:
    """Drop duplicates while keeping first-seen order."""
    return list(dict.fromkeys(question_ids))


class JsonFileSelectionStore:
    """Keeps the selection in a small JSON file; unreadable files mean no selection."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> list[str]:
        if not self._file_path.exists():
            return []
        try:
            raw = self._file_path.read_bytes()
            record = CustomSelectionRecord.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable custom selection in %s: %s", self._file_path, exc)
            return []
        return unique_in_order(record.selected_question_ids)

    def save(self, question_ids: Iterable[str]) -> None:
        record = CustomSelectionRecord(selected_question_ids=unique_in_order(question_ids))
        file_path = self._file_path.resolve()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        document = json.dumps(record.model_dump(by_alias=True), ensure_ascii=False, indent=2)
        file_path.write_text(document + "\n", encoding="utf-8")


class InMemorySelectionStore:
    """Selection store that lives only as long as the process."""

    def __init__(self, question_ids: Iterable[str] = ()) -> None:
        self._question_ids = unique_in_order(question_ids)

    def load(self) -> list[str]:
        return list(self._question_ids)

    def save(self, question_ids: Iterable[str]) -> None:
        self._question_ids = unique_in_order(question_ids)
