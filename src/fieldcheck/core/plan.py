"""
Validation plan components.

A plan is the ordered list of rule registrations accumulated by a validator
before a validation pass. Registration order is execution order.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Union

from .exceptions import ConfigurationError, InvalidParameterError


def normalize_fields(fields: Union[str, Sequence[str]]) -> List[str]:
    """
    Normalize a field name or a sequence of names to a non-empty list.

    Raises:
        InvalidParameterError: If no field is given or a name is not a string
    """
    if isinstance(fields, str):
        names = [fields]
    elif isinstance(fields, (list, tuple)):
        names = list(fields)
    else:
        raise InvalidParameterError(
            f"fields must be a name or a list of names, got {type(fields).__name__}"
        )

    if not names:
        raise InvalidParameterError("at least one field is required")
    for name in names:
        if not isinstance(name, str) or not name:
            raise InvalidParameterError(f"field names must be non-empty strings, got {name!r}")
    return names


@dataclass
class RuleRegistration:
    """
    One rule bound to fields, parameters and an optional message template.

    Attributes:
        rule: Rule name, resolved against the registry at execution time
        fields: Field names the rule applies to, in order
        params: Rule-specific parameters
        message: Message template; None means the rule's default message
    """

    rule: str
    fields: List[str]
    params: List[Any] = field(default_factory=list)
    message: Optional[str] = None

    @classmethod
    def create(
        cls, rule: str, fields: Union[str, Sequence[str]], params: Iterable[Any] = ()
    ) -> "RuleRegistration":
        """Build a registration with normalized fields."""
        return cls(rule=rule, fields=normalize_fields(fields), params=list(params))


class ValidationPlan:
    """Ordered collection of rule registrations."""

    def __init__(self):
        self._registrations: List[RuleRegistration] = []

    def add(self, registration: RuleRegistration) -> None:
        """Append a registration."""
        self._registrations.append(registration)

    def last(self) -> RuleRegistration:
        """
        Return the most recently added registration.

        Raises:
            ConfigurationError: If the plan is empty
        """
        if not self._registrations:
            raise ConfigurationError("no rule has been added to the plan yet")
        return self._registrations[-1]

    def clear(self) -> None:
        """Remove all registrations."""
        self._registrations = []

    def fields(self) -> List[str]:
        """Return every field referenced by the plan, first occurrence first."""
        seen: List[str] = []
        for registration in self._registrations:
            for name in registration.fields:
                if name not in seen:
                    seen.append(name)
        return seen

    def __iter__(self) -> Iterator[RuleRegistration]:
        return iter(list(self._registrations))

    def __len__(self) -> int:
        return len(self._registrations)
