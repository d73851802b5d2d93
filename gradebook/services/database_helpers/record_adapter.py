# /gradebook/services/database_helpers/record_adapter.py

"""
Converts records from external transports into the canonical entity shape.

Records arrive either from bundled JSON fixtures (`Id` integer key, `id`
roster string on students) or from a hosted record API whose custom fields
carry a `_c` suffix (`name_c`, `class_id_c`) and whose lookup fields are
nested `{"Id": ..., "Name": ...}` objects. Nothing past this module ever sees
those names.
"""

from typing import Any, Dict, Iterable, List, Type

from pydantic import BaseModel

from ...models.student_model import Student
from ...models.class_model import Class
from ...models.assignment_model import Assignment
from ...models.grade_model import Grade

ENTITY_MODELS: Dict[str, Type[BaseModel]] = {
    "student": Student,
    "class": Class,
    "assignment": Assignment,
    "grade": Grade,
}

# Transport names that do not follow the generic snake_case -> camelCase rule.
FIELD_ALIASES: Dict[str, Dict[str, str]] = {
    "student": {"student_id": "externalId", "roster_id": "externalId"},
    "class": {"categories": "gradeCategories"},
    "assignment": {"max_score": "maxPoints"},
    "grade": {"assignment": "assignmentName", "score": "points", "max_score": "maxPoints"},
}


def _camelize(key: str) -> str:
    if key.endswith("_c"):
        key = key[:-2]
    if key == "Id":
        return "id"
    if key[:1].isupper() and "_" not in key:
        return key[0].lower() + key[1:]
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _unwrap_lookup(value: Any) -> Any:
    # Lookup fields come back as {"Id": 3, "Name": "Algebra I"}.
    if isinstance(value, dict) and "Id" in value:
        return value["Id"]
    return value


def to_canonical(entity: str, record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Renames and reshapes one transport record. Fields the canonical model
    does not know about are dropped.
    """
    if entity not in ENTITY_MODELS:
        raise ValueError(f"Unknown entity type '{entity}'.")
    known_fields = ENTITY_MODELS[entity].model_fields
    aliases = FIELD_ALIASES.get(entity, {})
    has_integer_key = "Id" in record

    canonical: Dict[str, Any] = {}
    # Custom `_c` fields are applied last so they win over same-named system
    # fields (`name_c` over `Name`).
    for key, value in sorted(record.items(), key=lambda item: item[0].endswith("_c")):
        if entity == "student" and key == "id" and has_integer_key:
            name = "externalId"
        else:
            name = aliases.get(key) or aliases.get(key[:-2] if key.endswith("_c") else key) or _camelize(key)
        if name not in known_fields:
            continue
        if name == "parentContact" and isinstance(value, dict):
            canonical[name] = value
            continue
        canonical[name] = _unwrap_lookup(value)

    categories = canonical.get("gradeCategories")
    if isinstance(categories, str):
        canonical["gradeCategories"] = [c.strip() for c in categories.split(",") if c.strip()]
    return canonical


def to_models(entity: str, records: Iterable[Dict[str, Any]]) -> List[BaseModel]:
    """Adapts and validates a batch of transport records."""
    model = ENTITY_MODELS[entity]
    return [model.model_validate(to_canonical(entity, record)) for record in records]
