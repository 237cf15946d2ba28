"""
Template registry - the template library persisted as one JSON document.
"""

from __future__ import annotations

import json
import os
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from motion_rules.config import TEMPLATE_REGISTRY_VERSION
from motion_rules.core import (
    DuplicateTemplateError,
    StorageError,
    TemplateNotFoundError,
    get_logger,
)
from motion_rules.models import AnimationTemplate, TemplateCategory, utc_now_iso

logger = get_logger(__name__, component="template_registry")


@dataclass
class TemplateStats:
    total: int
    by_category: Dict[str, int] = field(default_factory=dict)
    by_platform: Dict[str, int] = field(default_factory=dict)
    by_complexity: Dict[str, int] = field(default_factory=dict)


class FileBasedTemplateRegistry:
    """JSON file holding the template library"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[AnimationTemplate]:
        """All templates; a missing or unreadable registry is an empty library"""
        if not self.path.exists():
            logger.warning("Template registry not found, using empty library", extra={"path": str(self.path)})
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            templates = [AnimationTemplate.model_validate(t) for t in payload.get("templates", [])]
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            logger.warning(
                "Template registry unreadable, using empty library",
                extra={"path": str(self.path), "error": str(e)},
            )
            return []

        logger.debug(
            "Template registry loaded",
            extra={"templates": len(templates), "version": payload.get("version")},
        )
        return templates

    def save(self, templates: List[AnimationTemplate]) -> None:
        categories = {category.value: 0 for category in TemplateCategory}
        for template in templates:
            categories[template.category.value] += 1

        registry: Dict[str, Any] = {
            "templates": [t.model_dump(mode="json") for t in templates],
            "version": TEMPLATE_REGISTRY_VERSION,
            "last_updated": utc_now_iso(),
            "categories": categories,
        }

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(registry, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Could not write template registry to {self.path}: {e}") from e

        logger.info("Template registry saved", extra={"templates": len(templates)})

    def add(self, template: AnimationTemplate) -> None:
        templates = self.load()
        if any(t.id == template.id for t in templates):
            raise DuplicateTemplateError(f'Template with ID "{template.id}" already exists')
        templates.append(template)
        self.save(templates)

    def update(self, template_id: str, updates: Dict[str, Any]) -> AnimationTemplate:
        """Merge field updates into a template; the result is re-validated"""
        templates = self.load()
        for index, template in enumerate(templates):
            if template.id == template_id:
                merged = AnimationTemplate.model_validate({**template.model_dump(), **updates})
                templates[index] = merged
                self.save(templates)
                return merged
        raise TemplateNotFoundError(f'Template "{template_id}" not found')

    def remove(self, template_id: str) -> None:
        templates = self.load()
        remaining = [t for t in templates if t.id != template_id]
        if len(remaining) == len(templates):
            raise TemplateNotFoundError(f'Template "{template_id}" not found')
        self.save(remaining)

    def stats(self) -> TemplateStats:
        templates = self.load()
        return TemplateStats(
            total=len(templates),
            by_category=dict(Counter(t.category.value for t in templates)),
            by_platform=dict(Counter(p.value for t in templates for p in t.platforms)),
            by_complexity=dict(Counter(t.complexity.value for t in templates)),
        )
