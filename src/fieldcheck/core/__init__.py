"""Core validation engine: field store, rule registry, plan and executor."""

from .config import ValidatorConfig
from .exceptions import (
    ConfigurationError,
    FieldcheckError,
    InvalidParameterError,
    InvalidPlanError,
    InvalidRuleError,
    UnknownRuleError,
)
from .fields import FieldStore
from .types import RuleContext
from .registry import RuleRegistry, get_default_registry
from .plan import RuleRegistration, ValidationPlan
from .report import ErrorReport, ValidationResult
from .validator import Validator

__all__ = [
    "ConfigurationError",
    "ErrorReport",
    "FieldStore",
    "FieldcheckError",
    "InvalidParameterError",
    "InvalidPlanError",
    "InvalidRuleError",
    "RuleContext",
    "RuleRegistration",
    "RuleRegistry",
    "UnknownRuleError",
    "ValidationPlan",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "get_default_registry",
]
