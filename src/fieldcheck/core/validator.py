"""
Validator facade and executor.

A ``Validator`` couples a field store with a validation plan built through
fluent calls, runs the plan against the store, and keeps the outcome of the
most recent pass.

Example:
    >>> v = Validator({"email": "not-an-email", "name": "Ada"})
    >>> v = v.rule("required", ["name", "email"]).rule("email", "email")
    >>> v.validate()
    False
    >>> v.errors("email")
    ['email is not a valid email address']

Each pass consumes the plan: after ``validate()`` the plan and pending errors
are reset, while the field data is kept so a new plan can be run against it.
The outcome of the pass stays readable through ``errors()`` and ``result``
until the next pass or ``reset()``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .config import ValidatorConfig
from .fields import FieldStore
from .loader import parse_plan
from .messages import format_message
from .plan import RuleRegistration, ValidationPlan
from .registry import RuleRegistry, get_default_registry
from .report import ErrorReport, ValidationResult
from .types import Predicate, RuleContext

logger = logging.getLogger(__name__)


class Validator:
    """
    Field validator with a fluent rule registration API.

    Attributes:
        registry: Rule registry used to resolve rule names
        config: Validator configuration
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        fields: Optional[Sequence[str]] = None,
        registry: Optional[RuleRegistry] = None,
        config: Optional[ValidatorConfig] = None,
    ):
        """
        Initialize a validator.

        Args:
            data: Input mapping of field names to values
            fields: Optional allow-list of field names to keep from ``data``
            registry: Rule registry; defaults to the shared registry
            config: Validator configuration; defaults to ``ValidatorConfig()``
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.config = config or ValidatorConfig()
        self._store = FieldStore(data, fields)
        self._context = RuleContext(store=self._store, config=self.config)
        self._plan = ValidationPlan()
        self._pending = ErrorReport()
        self._result: Optional[ValidationResult] = None

    @classmethod
    def add_rule(cls, name: str, predicate: Predicate, message: Optional[str] = None) -> None:
        """
        Register a custom rule on the shared registry.

        The rule becomes visible to every validator using the shared registry,
        including plans already built that reference it by name.

        Raises:
            InvalidRuleError: If the predicate is not callable
        """
        get_default_registry().register(name, predicate, message)

    def rule(self, name: str, fields: Union[str, Sequence[str]], *params: Any) -> "Validator":
        """
        Add a rule to the plan.

        Args:
            name: Rule name, built-in or registered
            fields: Field name or list of field names the rule applies to
            *params: Rule-specific parameters

        Returns:
            Validator: This validator, for chaining

        Raises:
            UnknownRuleError: If the rule name does not resolve
            InvalidParameterError: If fields are malformed or required parameters are missing
        """
        self._plan.add(self._registration(name, fields, params))
        return self

    def _registration(
        self, name: str, fields: Union[str, Sequence[str]], params: Sequence[Any]
    ) -> RuleRegistration:
        self.registry.resolve(name, self._context)
        registration = RuleRegistration.create(name, fields, params)
        self.registry.check_params(name, registration.params)
        return registration

    def message(self, template: str) -> "Validator":
        """
        Set the message template of the most recently added rule.

        ``{field}`` is replaced with the field name, ``{0}``, ``{1}``, ... with
        the rule parameters.

        Raises:
            ConfigurationError: If no rule has been added yet
        """
        self._plan.last().message = template
        return self

    def rules(self, plan: Mapping[str, Any]) -> "Validator":
        """
        Add every registration described by a declarative plan.

        See ``fieldcheck.core.loader`` for the plan format. Nothing is added
        unless every entry resolves.

        Raises:
            InvalidPlanError: If the plan does not match the plan schema
            UnknownRuleError: If a rule name does not resolve
        """
        registrations = []
        for entry in parse_plan(plan):
            registration = self._registration(entry.rule, entry.fields, entry.params)
            registration.message = entry.message
            registrations.append(registration)

        for registration in registrations:
            self._plan.add(registration)
        return self

    def error(self, field: str, message: str) -> None:
        """Record an error for a field, counted by the next validation pass."""
        self._pending.add(field, format_message(message, field, ()))

    def _message_for(self, registration: RuleRegistration, field: str) -> str:
        template = registration.message
        if template is None:
            template = self.registry.default_message(
                registration.rule, registration.params, self.config.messages
            )
        if template is None:
            template = self.config.default_message
        return format_message(template, field, registration.params)

    def validate(self) -> bool:
        """
        Run every registered rule against every one of its fields.

        No rule is skipped after an earlier failure. The plan and pending
        errors are reset afterwards, also when a rule or message raises; the
        outcome of a completed pass remains available through ``errors()``
        and ``result``.

        Returns:
            bool: True if no errors were recorded
        """
        report = self._pending
        executed: List[str] = []
        self._result = None

        try:
            for registration in self._plan:
                predicate = self.registry.resolve(registration.rule, self._context)
                executed.append(registration.rule)
                for field in registration.fields:
                    value = self._store.get(field)
                    if not predicate(field, value, registration.params):
                        report.add(field, self._message_for(registration, field))

            warnings: List[str] = []
            if self.config.warn_missing_fields:
                warnings = [
                    f"Field '{name}' is not present in the input data"
                    for name in self._plan.fields()
                    if name not in self._store
                ]

            self._result = ValidationResult(
                is_valid=report.is_empty(),
                errors=report.as_dict(),
                warnings=warnings,
                context={"rules": executed, "validated_fields": self._plan.fields()},
            )
            logger.debug(
                f"Validation pass ran {len(executed)} rules, {len(report)} field(s) failed"
            )
        finally:
            self._plan.clear()
            report.clear()

        return self._result.is_valid

    @property
    def result(self) -> Optional[ValidationResult]:
        """Outcome of the most recent completed validation pass, or None if there is none."""
        return self._result

    def errors(self, field: Optional[str] = None) -> Union[Dict[str, List[str]], List[str], None]:
        """
        Return the errors of the most recent validation pass.

        Args:
            field: Optional field name

        Returns:
            The full error mapping when no field is given. For a field, its
            messages, or None if it had no errors.
        """
        errors = self._result.errors if self._result is not None else {}
        if field is not None:
            messages = errors.get(field)
            return list(messages) if messages is not None else None
        return {name: list(messages) for name, messages in errors.items()}

    def data(self) -> Dict[str, Any]:
        """Return the filtered input data."""
        return self._store.all()

    def reset(self) -> None:
        """Discard the plan, pending errors and the last result; keep the field data."""
        self._plan.clear()
        self._pending.clear()
        self._result = None
