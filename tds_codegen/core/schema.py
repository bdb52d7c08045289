"""
Template metadata model.

Represents content-model templates, their fields and their base templates,
and converts JSON-shaped metadata exports into a linked template graph.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from .errors import CodegenError
from ..logging_config import get_logger

logger = get_logger(__name__)


class SchemaError(CodegenError):
    """Exception raised for invalid template metadata."""

    pass


@dataclass
class Field:
    """A named, typed template field with its encoded options string."""

    name: str
    type: str = ""
    data: str = ""
    id: Optional[str] = None


@dataclass(eq=False)
class Item:
    """Anything with a name and a namespace."""

    name: str
    namespace: str = ""


@dataclass(eq=False)
class Template(Item):
    """A content-model template with fields and base templates."""

    fields: List[Field] = field(default_factory=list)
    base_templates: List["Template"] = field(default_factory=list)
    id: Optional[str] = None

    def add_field(self, field: Field) -> None:
        """Add a field to this template."""
        self.fields.append(field)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def __repr__(self) -> str:
        # base_templates may be cyclic, keep the repr flat
        bases = [base.name for base in self.base_templates]
        return (
            f"Template(name={self.name!r}, namespace={self.namespace!r}, "
            f"fields={len(self.fields)}, base_templates={bases!r})"
        )


class TemplateSet:
    """Loaded templates, addressable by id or by name."""

    def __init__(self, templates: List[Template]):
        self.templates = templates
        self._by_id = {t.id: t for t in templates}

    def __iter__(self) -> Iterator[Template]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    def get(self, key: str) -> Optional[Template]:
        """Find a template by id, falling back to the first name match."""
        if key in self._by_id:
            return self._by_id[key]
        for template in self.templates:
            if template.name == key:
                return template
        return None


def _get_str(entry: Dict[str, Any], key: str, owner: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SchemaError(f"'{key}' of {owner} must be a string, got {type(value).__name__}")
    return value


def _get_list(entry: Dict[str, Any], key: str, owner: str) -> list:
    value = entry.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaError(f"'{key}' of {owner} must be a list, got {type(value).__name__}")
    return value


def _convert_field(field_data: Any, template_name: str) -> Field:
    owner = f"a field in template '{template_name}'"
    if not isinstance(field_data, dict):
        raise SchemaError(f"Field entries must be objects in template '{template_name}'")
    if not _get_str(field_data, "name", owner):
        raise SchemaError(f"Field without a name in template '{template_name}'")
    return Field(
        name=field_data["name"],
        type=_get_str(field_data, "type", owner),
        data=_get_str(field_data, "data", owner),
        id=field_data.get("id"),
    )


def load_templates(data: Dict[str, Any]) -> TemplateSet:
    """
    Build a linked template graph from metadata.

    Args:
        data: Dict with a ``templates`` list; each entry holds ``id``, ``name``,
            ``namespace``, ``fields`` and ``base_templates`` (a list of ids)

    Returns:
        TemplateSet with base template ids resolved to Template references

    Raises:
        SchemaError: If the structure is invalid or ids are duplicated
    """
    if not isinstance(data, dict) or not isinstance(data.get("templates"), list):
        raise SchemaError("Template metadata must be an object with a 'templates' list")

    templates: List[Template] = []
    by_id: Dict[str, Template] = {}
    base_ids: Dict[str, List[str]] = {}

    # First pass: build templates
    for entry in data["templates"]:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise SchemaError(f"Template entry must have a name: {entry!r}")
        owner = f"template '{entry['name']}'"
        name = _get_str(entry, "name", owner)

        template_id = str(entry.get("id") or entry["name"])
        if template_id in by_id:
            raise SchemaError(f"Duplicate template id: {template_id}")

        template = Template(
            name=name,
            namespace=_get_str(entry, "namespace", owner),
            id=template_id,
        )
        for field_data in _get_list(entry, "fields", owner):
            template.add_field(_convert_field(field_data, template.name))

        templates.append(template)
        by_id[template_id] = template
        base_ids[template_id] = [str(b) for b in _get_list(entry, "base_templates", owner)]

    # Second pass: link base templates
    for template in templates:
        for base_id in base_ids[template.id]:
            base = by_id.get(base_id)
            if base is None:
                logger.warning(
                    "Template '%s' references unknown base template '%s'; skipping",
                    template.name,
                    base_id,
                )
                continue
            template.base_templates.append(base)

    logger.debug("Loaded %d templates", len(templates))
    return TemplateSet(templates)


def load_templates_file(path: Union[str, Path]) -> TemplateSet:
    """Load template metadata from a JSON file."""
    path = Path(path)

    if not path.exists():
        raise SchemaError(f"Template metadata file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in template metadata {path}: {e}") from e
    except OSError as e:
        raise SchemaError(f"Failed to read template metadata {path}: {e}") from e

    logger.info("Loaded template metadata from %s", path)
    return load_templates(data)
