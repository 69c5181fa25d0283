"""
Presence, comparison and membership rules.

Rules:
- required: value is present and, for strings, not blank
- equals / different: value loosely equals (or differs from) another field
- accepted: value is one of "yes", "on", 1 or True, compared strictly
- in / notIn: value is (or is not) loosely equal to a member of a list
"""

from typing import Any, List

from ..core.exceptions import InvalidParameterError
from ..core.types import RuleContext
from .base import BuiltinRule, loose_equals, param

ACCEPTABLE = ("yes", "on", 1, True)


def validate_required(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass unless the value is None or a whitespace-only string."""
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def validate_equals(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if the field named by params[0] is set and loosely equals the value."""
    other = param(params, 0, "equals")
    return context.store.has(other) and loose_equals(value, context.store.get(other))


def validate_different(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if the field named by params[0] is set and differs from the value."""
    other = param(params, 0, "different")
    return context.store.has(other) and not loose_equals(value, context.store.get(other))


def validate_accepted(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if the value is present and, type included, one of the acceptable values."""
    if not validate_required(field, value, params, context):
        return False
    return any(type(value) is type(candidate) and value == candidate for candidate in ACCEPTABLE)


def _haystack(params: List[Any], rule: str) -> Any:
    values = param(params, 0, rule)
    if not isinstance(values, (list, tuple, set, frozenset)):
        raise InvalidParameterError(
            f"Rule '{rule}' expects a list of values, got {type(values).__name__}"
        )
    return values


def validate_in(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if the value loosely equals a member of params[0]."""
    return any(loose_equals(value, candidate) for candidate in _haystack(params, "in"))


def validate_not_in(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if the value loosely equals no member of params[0]."""
    return not any(loose_equals(value, candidate) for candidate in _haystack(params, "notIn"))


RULES = [
    BuiltinRule("required", validate_required),
    BuiltinRule("equals", validate_equals, min_params=1),
    BuiltinRule("different", validate_different, min_params=1),
    BuiltinRule("accepted", validate_accepted),
    BuiltinRule("in", validate_in, min_params=1),
    BuiltinRule("notIn", validate_not_in, min_params=1),
]
