"""
Character class and pattern rules.

The alpha rules accept ASCII characters only and require at least one
character. The regex rule uses search semantics, so patterns must anchor
themselves to match the whole value.
"""

import re
from typing import Any, List

from ..core.exceptions import InvalidParameterError
from ..core.types import RuleContext
from .base import BuiltinRule, param

ALPHA_PATTERN = re.compile(r"[A-Za-z]+")
ALPHA_NUM_PATTERN = re.compile(r"[A-Za-z0-9]+")
ALPHA_DASH_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def _full_match(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_alpha(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    return _full_match(ALPHA_PATTERN, value)


def validate_alpha_num(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    return _full_match(ALPHA_NUM_PATTERN, value)


def validate_alpha_dash(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    return _full_match(ALPHA_DASH_PATTERN, value)


def compile_pattern(pattern: Any) -> re.Pattern:
    """
    Compile a regex rule parameter.

    Raises:
        InvalidParameterError: If the pattern is not a string or does not compile
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise InvalidParameterError(
            f"Rule 'regex' expects a pattern string, got {type(pattern).__name__}"
        )
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidParameterError(f"Invalid regex pattern {pattern!r}: {e}") from e


def validate_regex(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if params[0] matches anywhere in the value."""
    pattern = compile_pattern(param(params, 0, "regex"))
    if value is None:
        return False
    return pattern.search(value if isinstance(value, str) else str(value)) is not None


RULES = [
    BuiltinRule("alpha", validate_alpha),
    BuiltinRule("alphaNum", validate_alpha_num),
    BuiltinRule("alphaDash", validate_alpha_dash),
    BuiltinRule("regex", validate_regex, min_params=1),
]
