"""
fieldcheck - Declarative field validation for request input

This package validates mappings of field names to raw values, such as form or
API payloads, against an ordered plan of named rules. It includes:

- A fluent API for building validation plans
- A catalog of built-in rules (presence, equality, numbers, strings, network, dates)
- A shared, extensible rule registry for custom rules
- Per-field error reports with configurable messages

Example:
    >>> from fieldcheck import Validator
    >>> v = Validator({"email": "ada@example.com"}).rule("required", "email")
    >>> v.validate()
    True
"""

__version__ = "0.1.0"
__author__ = "fieldcheck contributors"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("fieldcheck requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core import (
    ConfigurationError,
    InvalidParameterError,
    InvalidPlanError,
    InvalidRuleError,
    RuleRegistry,
    UnknownRuleError,
    ValidationResult,
    Validator,
    ValidatorConfig,
    get_default_registry,
)
from .utils import ValidationReporter

__all__ = [
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidPlanError",
    "InvalidRuleError",
    "RuleRegistry",
    "UnknownRuleError",
    "ValidationReporter",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "get_default_registry",
]
