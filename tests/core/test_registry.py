"""
Tests for the rule registry.
"""

import threading

import pytest

from fieldcheck.core.exceptions import InvalidParameterError, InvalidRuleError, UnknownRuleError
from fieldcheck.core.registry import RuleRegistry, get_default_registry
from fieldcheck.rules import BUILTIN_RULES

EXPECTED_BUILTINS = {
    "required", "equals", "different", "accepted", "numeric", "integer", "length",
    "min", "max", "in", "notIn", "ip", "email", "url", "urlActive", "alpha",
    "alphaNum", "alphaDash", "regex", "date", "dateFormat", "dateBefore", "dateAfter",
}


@pytest.fixture
def registry():
    """Fixture providing an isolated registry."""
    return RuleRegistry()


def test_catalog_covers_every_builtin():
    """Test the built-in catalog maps every rule name."""
    assert set(BUILTIN_RULES) == EXPECTED_BUILTINS


def test_resolve_builtin_binds_context(registry, make_context):
    """Test built-ins resolve to a three-argument predicate."""
    predicate = registry.resolve("required", make_context())
    assert predicate("f", "x", []) is True
    assert predicate("f", "", []) is False


def test_resolve_builtin_sees_field_store(registry, make_context):
    """Test cross-field built-ins read the bound field store."""
    predicate = registry.resolve("equals", make_context({"a": "x"}))
    assert predicate("b", "x", ["a"]) is True


def test_resolve_unknown_rule(registry, context):
    """Test unknown names raise UnknownRuleError."""
    with pytest.raises(UnknownRuleError, match="bogus"):
        registry.resolve("bogus", context)


def test_register_custom_rule(registry, context):
    """Test custom rules resolve to the registered callable."""

    def always(field, value, params):
        return True

    registry.register("always", always)
    assert registry.resolve("always", context) is always
    assert "always" in registry
    assert "always" in registry.names()


def test_register_rejects_non_callable(registry):
    """Test only callables can be registered."""
    with pytest.raises(InvalidRuleError, match="callable"):
        registry.register("broken", "not a function")


def test_register_rejects_empty_name(registry):
    """Test rule names must be non-empty strings."""
    with pytest.raises(InvalidRuleError):
        registry.register("", lambda field, value, params: True)


def test_custom_rule_overrides_builtin(registry, context, caplog):
    """Test a custom rule shadows the built-in of the same name."""
    registry.register("required", lambda field, value, params: True)

    assert registry.resolve("required", context)("f", None, []) is True
    assert "overrides the built-in" in caplog.text


def test_unregister_restores_builtin(registry, context):
    """Test removing an override makes the built-in visible again."""
    registry.register("required", lambda field, value, params: True)
    registry.unregister("required")
    registry.unregister("never-registered")

    assert registry.resolve("required", context)("f", None, []) is False


def test_check_params_for_builtins(registry):
    """Test built-ins with required parameters reject missing ones."""
    registry.check_params("length", [3])
    registry.check_params("required", [])
    with pytest.raises(InvalidParameterError, match="length"):
        registry.check_params("length", [])


def test_check_params_skips_custom_rules(registry):
    """Test custom rules define their own parameters."""
    registry.register("length", lambda field, value, params: True)
    registry.check_params("length", [])


def test_default_messages(registry):
    """Test default message lookup for built-in and custom rules."""
    registry.register("even", lambda field, value, params: True, message="{field} must be even")
    registry.register("odd", lambda field, value, params: True)

    assert registry.default_message("required", []) == "{field} is required"
    assert registry.default_message("length", [1, 5]) == (
        "{field} must be between {0} and {1} characters"
    )
    assert registry.default_message("even", []) == "{field} must be even"
    assert registry.default_message("odd", []) is None
    assert registry.default_message("odd", [], {"odd": "{field} odd"}) == "{field} odd"


def test_default_registry_is_shared():
    """Test the default registry is a single shared instance."""
    assert get_default_registry() is get_default_registry()


def test_concurrent_registration(registry):
    """Test concurrent registrations are all kept."""

    def register_many(prefix):
        for i in range(50):
            registry.register(f"{prefix}{i}", lambda field, value, params: True)

    threads = [threading.Thread(target=register_many, args=(f"t{n}_",)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    custom = [name for name in registry.names() if name not in BUILTIN_RULES]
    assert len(custom) == 200
