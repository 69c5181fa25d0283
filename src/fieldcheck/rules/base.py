"""
Shared building blocks for the built-in rule catalog.

This module provides the ``BuiltinRule`` record used to register built-in
predicates, parameter access helpers that raise ``InvalidParameterError`` for
malformed parameters instead of failing validation, and the number parsing and
loose equality policy shared by several rules.

Loose equality policy:
    Two values are loosely equal if they compare equal with ``==``, if both
    parse as numbers and the numbers are equal, or if both are scalars whose
    string forms match. Booleans count as 1 and 0 in both comparisons. ``None``
    is only equal to ``None``.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from ..core.exceptions import InvalidParameterError
from ..core.types import BuiltinPredicate

NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_MISSING = object()


@dataclass(frozen=True)
class BuiltinRule:
    """
    A built-in rule entry.

    Attributes:
        name: Rule name used in plans
        predicate: Predicate taking ``(field, value, params, context)``
        min_params: Number of parameters the rule cannot run without
    """

    name: str
    predicate: BuiltinPredicate
    min_params: int = 0


def param(params: List[Any], index: int, rule: str, default: Any = _MISSING) -> Any:
    """
    Fetch a rule parameter by position.

    Raises:
        InvalidParameterError: If the parameter is missing and no default is given
    """
    if index < len(params):
        return params[index]
    if default is not _MISSING:
        return default
    raise InvalidParameterError(f"Rule '{rule}' requires parameter {index + 1}")


def to_number(value: Any) -> Optional[Union[int, float]]:
    """
    Parse a value as a number.

    Returns:
        The int or float value, or None if the value is not numeric
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and NUMERIC_PATTERN.match(value):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    return None


def numeric_param(params: List[Any], index: int, rule: str) -> Union[int, float]:
    """Fetch a parameter that must be numeric."""
    value = param(params, index, rule)
    number = to_number(value)
    if number is None or isinstance(value, bool):
        raise InvalidParameterError(
            f"Rule '{rule}' parameter {index + 1} must be numeric, got {value!r}"
        )
    return number


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def loose_equals(left: Any, right: Any) -> bool:
    """Compare two values using the loose equality policy."""
    if left is None or right is None:
        return left is None and right is None
    if left == right:
        return True
    if not (_is_scalar(left) and _is_scalar(right)):
        return False

    left_number, right_number = to_number(left), to_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number
    return _as_text(left) == _as_text(right)
