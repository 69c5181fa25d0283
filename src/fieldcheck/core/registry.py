"""
Rule registry.

The registry maps rule names to predicates. Resolution first looks for a custom
rule registered under the exact name, then falls back to the built-in catalog.
A custom rule registered under a built-in name therefore overrides the built-in
for every validator using the registry.

Registrations are serialized by a lock and applied copy-on-write: readers take
a reference to the current mapping and never observe a partial update.
"""

import logging
from dataclasses import dataclass
from functools import partial
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..rules import BUILTIN_RULES, BuiltinRule
from .exceptions import InvalidParameterError, InvalidRuleError, UnknownRuleError
from .messages import default_message
from .types import Predicate, RuleContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomRule:
    """A user-registered predicate and its optional default message."""

    name: str
    predicate: Predicate
    message: Optional[str] = None


class RuleRegistry:
    """
    Thread-safe mapping from rule names to predicates.

    Attributes:
        builtins: Built-in catalog consulted after custom rules
    """

    def __init__(self, builtins: Optional[Mapping[str, BuiltinRule]] = None):
        self.builtins: Dict[str, BuiltinRule] = dict(
            BUILTIN_RULES if builtins is None else builtins
        )
        self._custom: Dict[str, CustomRule] = {}
        self._lock = Lock()

    def register(self, name: str, predicate: Predicate, message: Optional[str] = None) -> None:
        """
        Register a custom rule, replacing any rule of the same name.

        Args:
            name: Rule name used in plans
            predicate: Callable taking ``(field, value, params)`` and returning a truthy result
            message: Default message template for the rule

        Raises:
            InvalidRuleError: If the name is empty or the predicate is not callable

        Example:
            >>> registry = RuleRegistry()
            >>> registry.register("even", lambda field, value, params: int(value) % 2 == 0)
        """
        if not isinstance(name, str) or not name:
            raise InvalidRuleError(f"Rule name must be a non-empty string, got {name!r}")
        if not callable(predicate):
            raise InvalidRuleError(
                f"Predicate for rule '{name}' must be callable, got {type(predicate).__name__}"
            )

        with self._lock:
            if name in self.builtins and name not in self._custom:
                logger.warning(f"Custom rule '{name}' overrides the built-in rule")
            custom = dict(self._custom)
            custom[name] = CustomRule(name, predicate, message)
            self._custom = custom
        logger.debug(f"Registered rule: {name}")

    def unregister(self, name: str) -> None:
        """Remove a custom rule; a built-in of the same name becomes visible again."""
        with self._lock:
            if name not in self._custom:
                return
            custom = dict(self._custom)
            del custom[name]
            self._custom = custom
        logger.debug(f"Unregistered rule: {name}")

    def clear(self) -> None:
        """Remove every custom rule."""
        with self._lock:
            self._custom = {}

    def resolve(self, name: str, context: RuleContext) -> Predicate:
        """
        Resolve a rule name to a predicate taking ``(field, value, params)``.

        Args:
            name: Rule name
            context: Validator state bound into built-in predicates

        Returns:
            Predicate: The callable to invoke per field

        Raises:
            UnknownRuleError: If neither a custom nor a built-in rule has this name
        """
        custom = self._custom.get(name)
        if custom is not None:
            return custom.predicate

        builtin = self.builtins.get(name)
        if builtin is not None:
            return partial(builtin.predicate, context=context)

        raise UnknownRuleError(
            f"Rule '{name}' is not a built-in rule and has not been registered"
        )

    def check_params(self, name: str, params: Sequence[Any]) -> None:
        """
        Check that a built-in rule gets the parameters it cannot run without.

        Custom rules define their own parameters and are not checked.

        Raises:
            InvalidParameterError: If a built-in rule is missing parameters
        """
        if name in self._custom:
            return
        builtin = self.builtins.get(name)
        if builtin is not None and len(params) < builtin.min_params:
            raise InvalidParameterError(
                f"Rule '{name}' requires {builtin.min_params} parameter(s), got {len(params)}"
            )

    def default_message(
        self, name: str, params: Sequence[Any], overrides: Optional[Dict[str, str]] = None
    ) -> Optional[str]:
        """Return the default message template for a rule, or None if it has none."""
        custom = self._custom.get(name)
        if custom is not None:
            return (overrides or {}).get(name, custom.message)
        return default_message(name, params, overrides)

    def has_rule(self, name: str) -> bool:
        """Return True if the name resolves to a custom or built-in rule."""
        return name in self._custom or name in self.builtins

    def names(self) -> List[str]:
        """Return every resolvable rule name, built-ins first."""
        return list(self.builtins) + [name for name in self._custom if name not in self.builtins]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_rule(name)


_default_registry = RuleRegistry()


def get_default_registry() -> RuleRegistry:
    """Return the registry shared by validators created without one."""
    return _default_registry
