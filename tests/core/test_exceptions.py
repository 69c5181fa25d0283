"""
Tests for custom exceptions.
"""

import pytest

from fieldcheck.core.exceptions import (
    ConfigurationError,
    FieldcheckError,
    InvalidParameterError,
    InvalidPlanError,
    InvalidRuleError,
    UnknownRuleError,
)
from fieldcheck.core.validator import Validator


def test_configuration_error_message():
    """Test configuration error message formatting."""
    error = ConfigurationError("test message")
    assert str(error) == "Configuration Error: test message"


def test_subclass_message_formatting():
    """Test subclasses inherit the configuration error formatting."""
    assert str(UnknownRuleError("bogus")) == "Configuration Error: bogus"


@pytest.mark.parametrize(
    "error_class",
    [UnknownRuleError, InvalidRuleError, InvalidParameterError, InvalidPlanError],
)
def test_hierarchy(error_class):
    """Test every configuration error shares the common bases."""
    assert issubclass(error_class, ConfigurationError)
    assert issubclass(error_class, FieldcheckError)


def test_invalid_parameter_is_value_error():
    """Test InvalidParameterError can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise InvalidParameterError("bad parameter")


def test_unknown_rule_raised_before_validation():
    """Test a typo'd rule name fails when it is added, not when validating."""
    validator = Validator({"f": "value"})
    with pytest.raises(ConfigurationError, match="bogus"):
        validator.rule("bogus", "f")
