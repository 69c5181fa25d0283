"""
Declarative validation plans.

A declarative plan maps rule names to the registrations to create for them.
Each registration entry is one of:

- a field name: ``"email"``
- a list whose first item is a field name or list of names, followed by the
  rule parameters: ``["password", 8, 64]``
- an object with ``fields`` and optional ``params`` and ``message``

Example:
    >>> plan = {
    ...     "required": ["name", "email"],
    ...     "length": [["name", 1, 40]],
    ...     "email": [{"fields": "email", "message": "{field} looks wrong"}],
    ... }

The plan shape is checked with a JSON schema before any entry is used.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import InvalidPlanError

logger = logging.getLogger(__name__)

PLAN_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": {
        "anyOf": [
            {"$ref": "#/$defs/fieldName"},
            {"type": "array", "items": {"$ref": "#/$defs/entry"}},
        ]
    },
    "$defs": {
        "fieldName": {"type": "string", "minLength": 1},
        "fields": {
            "anyOf": [
                {"$ref": "#/$defs/fieldName"},
                {"type": "array", "items": {"$ref": "#/$defs/fieldName"}, "minItems": 1},
            ]
        },
        "entry": {
            "anyOf": [
                {"$ref": "#/$defs/fieldName"},
                {
                    "type": "array",
                    "minItems": 1,
                    "prefixItems": [{"$ref": "#/$defs/fields"}],
                },
                {
                    "type": "object",
                    "required": ["fields"],
                    "properties": {
                        "fields": {"$ref": "#/$defs/fields"},
                        "params": {"type": "array"},
                        "message": {"type": "string"},
                    },
                    "additionalProperties": False,
                },
            ]
        },
    },
}


@dataclass
class PlanEntry:
    """One registration described by a declarative plan."""

    rule: str
    fields: Union[str, List[str]]
    params: List[Any] = field(default_factory=list)
    message: Optional[str] = None


def _entry(rule: str, raw: Any) -> PlanEntry:
    if isinstance(raw, str):
        return PlanEntry(rule, raw)
    if isinstance(raw, Sequence):
        return PlanEntry(rule, raw[0], list(raw[1:]))
    return PlanEntry(rule, raw["fields"], list(raw.get("params", [])), raw.get("message"))


def parse_plan(plan: Mapping[str, Any]) -> List[PlanEntry]:
    """
    Check a declarative plan against the plan schema and flatten it.

    Args:
        plan: Mapping of rule names to registration entries

    Returns:
        List[PlanEntry]: Entries in plan order

    Raises:
        InvalidPlanError: If the plan does not match the schema
    """
    try:
        json_validate(instance=plan, schema=PLAN_SCHEMA)
    except JsonSchemaError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise InvalidPlanError(f"Invalid validation plan at {location}: {e.message}") from e

    entries: List[PlanEntry] = []
    for rule, raw_entries in plan.items():
        if isinstance(raw_entries, str):
            raw_entries = [raw_entries]
        entries.extend(_entry(rule, raw) for raw in raw_entries)

    logger.debug(f"Parsed validation plan with {len(entries)} entries")
    return entries
