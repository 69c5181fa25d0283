"""
Built-in rule catalog.

``BUILTIN_RULES`` maps every built-in rule name to its ``BuiltinRule`` entry.
It is built once at import time and consulted by the rule registry when no
custom rule of the same name is registered.
"""

from typing import Dict

from . import basic, dates, network, numeric, strings
from .base import BuiltinRule, loose_equals, to_number

BUILTIN_RULES: Dict[str, BuiltinRule] = {
    rule.name: rule
    for module in (basic, numeric, strings, network, dates)
    for rule in module.RULES
}

__all__ = [
    "BUILTIN_RULES",
    "BuiltinRule",
    "loose_equals",
    "to_number",
]
