#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Template Registry - Lookup capability for templates.

Holds the seeded system templates plus user templates persisted as JSON.
Documents reference templates by id only; ``resolve`` turns a possibly
dangling id into a template by falling back to the default template.
"""

import json
import os
import tempfile
import uuid
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from config.constants import CUSTOM_TEMPLATE_PREFIX, DEFAULT_TEMPLATE_ID
from config.logging_config import get_logger

from ..exceptions import (
    SystemTemplateError,
    TemplateNotFoundError,
    TemplateStorageError,
    TemplateValidationError,
)
from ..style_model import LayoutSpec
from .base_template import Template, TemplateElements, TemplateStyles
from .system_templates import SYSTEM_TEMPLATES

logger = get_logger(__name__)

TemplateListener = Callable[[str, Template], None]


class TemplateRegistry:
    """
    Registry of system and user templates.

    Usage:
        registry = TemplateRegistry(storage_path=Path("data/custom_templates.json"))

        template = registry.resolve(document.template_id)   # never raises
        custom = registry.add(name="Mine", description="", layout=..., styles=...)
        registry.delete(custom.id)

    Listeners subscribed with ``subscribe`` are called with
    ("added" | "deleted" | "reset", template) after each change.
    """

    def __init__(
        self,
        storage_path: Optional[Path] = None,
        system_templates: Iterable[Template] = SYSTEM_TEMPLATES,
        default_template_id: str = DEFAULT_TEMPLATE_ID,
    ):
        self._system: Dict[str, Template] = {}
        for template in system_templates:
            if not template.is_system:
                raise TemplateValidationError(
                    f"'{template.id}' is not flagged as a system template", "is_system"
                )
            self._system[template.id] = template

        if not self._system:
            raise TemplateValidationError("at least one system template is required", "system")

        if default_template_id not in self._system:
            raise TemplateValidationError(
                f"default template '{default_template_id}' is not a system template",
                "default_template_id",
            )
        self._default_id = default_template_id

        self._storage_path = Path(storage_path) if storage_path else None
        self._custom: Dict[str, Template] = {}
        self._listeners: List[TemplateListener] = []

        for template in self._load_custom():
            if template.id in self._system:
                logger.warning("Ignoring stored template that shadows system id %s", template.id)
                continue
            self._custom[template.id] = template

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def default(self) -> Template:
        """Template used when a lookup misses."""
        return self._system[self._default_id]

    def list(self) -> List[Template]:
        """System templates first (seed order), then user templates (creation order)."""
        return [*self._system.values(), *self._custom.values()]

    def get(self, template_id: Optional[str]) -> Optional[Template]:
        if template_id is None:
            return None
        return self._system.get(template_id) or self._custom.get(template_id)

    def require(self, template_id: str) -> Template:
        template = self.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def resolve(self, template_id: Optional[str]) -> Template:
        """Return the referenced template, or the default one on a miss."""
        template = self.get(template_id)
        if template is None:
            logger.warning(
                "Template '%s' not found; falling back to '%s'", template_id, self._default_id
            )
            return self.default
        return template

    def __contains__(self, template_id: str) -> bool:
        return self.get(template_id) is not None

    def __len__(self) -> int:
        return len(self._system) + len(self._custom)

    # ------------------------------------------------------------------
    # Mutation (user templates only)
    # ------------------------------------------------------------------

    def add(
        self,
        name: str,
        description: str,
        layout: LayoutSpec,
        styles: TemplateStyles,
        elements: Optional[TemplateElements] = None,
        thumbnail_url: Optional[str] = None,
    ) -> Template:
        """Create and persist a new user template with a generated id."""
        template = Template(
            id=self._new_id(),
            name=name,
            description=description,
            layout=layout,
            styles=styles,
            elements=elements or TemplateElements(),
            is_system=False,
            thumbnail_url=thumbnail_url,
        )
        self._custom[template.id] = template
        try:
            self._save_custom()
        except TemplateStorageError:
            del self._custom[template.id]
            raise

        logger.info("Added template %s (%s)", template.id, template.name)
        self._notify("added", template)
        return template

    def add_from_dict(self, data: Dict) -> Template:
        """Create a user template from its JSON shape; id and isSystem are ignored."""
        return self.add(
            name=data.get("name"),
            description=data.get("description", ""),
            layout=LayoutSpec.from_dict(data.get("layout")),
            styles=TemplateStyles.from_dict(data.get("styles")),
            elements=TemplateElements.from_dict(data.get("elements")),
            thumbnail_url=data.get("thumbnailUrl", data.get("thumbnail_url")),
        )

    def delete(self, template_id: str) -> Template:
        """Delete a user template; documents referencing it fall back on resolve."""
        if template_id in self._system:
            raise SystemTemplateError(template_id)
        template = self._custom.pop(template_id, None)
        if template is None:
            raise TemplateNotFoundError(template_id)
        try:
            self._save_custom()
        except TemplateStorageError:
            self._custom[template_id] = template
            raise

        logger.info("Deleted template %s", template_id)
        self._notify("deleted", template)
        return template

    def reset(self) -> None:
        """Drop every user template."""
        removed = list(self._custom.values())
        self._custom.clear()
        self._save_custom()
        logger.info("Removed %d custom templates", len(removed))
        for template in removed:
            self._notify("reset", template)

    def subscribe(self, listener: TemplateListener) -> Callable[[], None]:
        """Register a change listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_id(self) -> str:
        while True:
            candidate = f"{CUSTOM_TEMPLATE_PREFIX}{uuid.uuid4().hex[:12]}"
            if candidate not in self:
                return candidate

    def _notify(self, event: str, template: Template) -> None:
        for listener in list(self._listeners):
            listener(event, template)

    def _load_custom(self) -> List[Template]:
        """Read stored user templates; unreadable storage counts as empty."""
        if self._storage_path is None or not self._storage_path.exists():
            return []

        try:
            raw = json.loads(self._storage_path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise TemplateValidationError("expected a JSON list", "custom_templates")
            templates = []
            for item in raw:
                template = Template.from_dict({**item, "isSystem": False})
                templates.append(template)
            return templates
        except (OSError, json.JSONDecodeError, TemplateValidationError, TypeError) as exc:
            logger.error("Failed to load custom templates from %s: %s", self._storage_path, exc)
            return []

    def _save_custom(self) -> None:
        if self._storage_path is None:
            return

        payload = json.dumps(
            [t.to_dict() for t in self._custom.values()], indent=2, ensure_ascii=False
        )
        tmp_name = None
        try:
            self._storage_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self._storage_path.parent), prefix=".templates-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._storage_path)
        except OSError as exc:
            logger.exception("Failed to save custom templates to %s", self._storage_path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise TemplateStorageError(str(exc)) from exc
