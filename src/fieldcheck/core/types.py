"""
Shared types for rule predicates.

Custom predicates take ``(field, value, params)``. Built-in predicates take an
additional ``context`` argument, which the registry binds before handing the
predicate to the executor.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Protocol

from .config import ValidatorConfig
from .fields import FieldStore

Predicate = Callable[[str, Any, List[Any]], bool]


@dataclass
class RuleContext:
    """Per-validator state visible to built-in predicates."""

    store: FieldStore
    config: ValidatorConfig = field(default_factory=ValidatorConfig)


class BuiltinPredicate(Protocol):
    """Protocol for built-in rule predicates."""

    def __call__(self, field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
        ...
