"""
Preference repository - persistence for the correction store document.

The whole PreferenceDocument is loaded and saved as one unit. Any backend
(file, key-value store, remote service) can implement PreferenceRepository
without touching enforcement logic.

Load never fails: a missing document means "no corrections yet" and an
unreadable or corrupt one is replaced by a fresh default, because losing
learning history is preferable to blocking generation.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from motion_rules.core import StorageError, get_logger
from motion_rules.models import PreferenceDocument

logger = get_logger(__name__, component="preference_repository")


class PreferenceRepository(ABC):
    """Abstract repository for the correction store document."""

    @abstractmethod
    def load(self) -> PreferenceDocument:
        pass

    @abstractmethod
    def save(self, document: PreferenceDocument) -> None:
        pass


class InMemoryPreferenceRepository(PreferenceRepository):
    """Keeps the document in process memory. Useful for tests and short-lived hosts."""

    def __init__(self, document: Optional[PreferenceDocument] = None):
        self._document = document.model_copy(deep=True) if document else None

    def load(self) -> PreferenceDocument:
        if self._document is None:
            return PreferenceDocument()
        return self._document.model_copy(deep=True)

    def save(self, document: PreferenceDocument) -> None:
        self._document = document.model_copy(deep=True)


class FileBasedPreferenceRepository(PreferenceRepository):
    """JSON file repository for the correction store document."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> PreferenceDocument:
        if not self.path.exists():
            logger.debug("No preference document yet, using defaults", extra={"path": str(self.path)})
            return PreferenceDocument()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            return PreferenceDocument.model_validate(payload)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(
                "Preference document unreadable, falling back to defaults",
                extra={"path": str(self.path), "error": str(e)},
            )
            return PreferenceDocument()

    def save(self, document: PreferenceDocument) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document.model_dump(mode="json"), f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Could not write preference document to {self.path}: {e}") from e
