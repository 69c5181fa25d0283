"""
Numeric and length rules.

Rules:
- numeric: value is a number or a numeric string (signed, decimal or exponential)
- integer: value is a whole number, optionally signed, without leading zeros
- length: character length equals params[0], or lies within [params[0], params[1]]
- min / max: numeric value is at least / at most params[0]
"""

import re
from typing import Any, List

from ..core.types import RuleContext
from .base import BuiltinRule, NUMERIC_PATTERN, numeric_param, param, to_number

INTEGER_PATTERN = re.compile(r"[+-]?(0|[1-9]\d*)")


def validate_numeric(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and NUMERIC_PATTERN.match(value) is not None


def validate_integer(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()) is not None


def string_length(value: Any) -> int:
    """Return the length of a value in characters."""
    if value is None:
        return 0
    return len(value if isinstance(value, str) else str(value))


def validate_length(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    length = string_length(value)
    lower = numeric_param(params, 0, "length")
    if param(params, 1, "length", None) is not None:
        upper = numeric_param(params, 1, "length")
        return lower <= length <= upper
    return length == lower


def validate_min(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    bound = numeric_param(params, 0, "min")
    number = None if isinstance(value, bool) else to_number(value)
    return number is not None and number >= bound


def validate_max(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    bound = numeric_param(params, 0, "max")
    number = None if isinstance(value, bool) else to_number(value)
    return number is not None and number <= bound


RULES = [
    BuiltinRule("numeric", validate_numeric),
    BuiltinRule("integer", validate_integer),
    BuiltinRule("length", validate_length, min_params=1),
    BuiltinRule("min", validate_min, min_params=1),
    BuiltinRule("max", validate_max, min_params=1),
]
