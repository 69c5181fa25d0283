"""
Custom exceptions for the field validation engine.

This module defines the hierarchy of exceptions raised for programmer mistakes
made while configuring a validator. Failed validation is never an exception: it
is recorded in the error report and reflected in the boolean result of
``Validator.validate()``.
"""


class FieldcheckError(Exception):
    """Base class for all fieldcheck exceptions."""


class ConfigurationError(FieldcheckError):
    """
    Raised when a validator is configured incorrectly.

    This exception covers mistakes detected while building a validation plan or
    registering rules. They are not recoverable by the engine and are propagated
    to the caller.

    Examples:
        * Setting a message before any rule was added
        * Loading a malformed declarative plan
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class UnknownRuleError(ConfigurationError):
    """
    Raised when a rule name cannot be resolved.

    Resolution is checked when the rule is added to a plan, so a typo in a rule
    name surfaces before any validation runs.

    Examples:
        * ``Validator(data).rule("requried", "name")``
        * Referencing a custom rule that was never registered
    """


class InvalidRuleError(ConfigurationError):
    """
    Raised when a custom rule cannot be registered.

    Examples:
        * Registering a predicate that is not callable
        * Registering under an empty name
    """


class InvalidParameterError(ConfigurationError, ValueError):
    """
    Raised when rule parameters or message templates are malformed.

    Examples:
        * ``length`` without a length parameter
        * ``in`` with a haystack that is not a list
        * ``regex`` with a pattern that does not compile
        * A message template referencing a parameter that was not given
    """


class InvalidPlanError(ConfigurationError):
    """
    Raised when a declarative validation plan does not match the plan schema.

    Examples:
        * A rule entry that is neither a field name, a list nor an object
        * An object entry without ``fields``
    """
