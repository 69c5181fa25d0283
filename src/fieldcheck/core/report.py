"""
Error report and validation result containers.

The error report collects formatted failure messages per field during a
validation pass. The validation result is the snapshot a validator keeps after
the pass, once its plan and pending errors have been reset.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class ErrorReport:
    """
    Per-field collection of formatted failure messages.

    Messages for a field are kept in the order the failing rules were
    evaluated. A field with no failures is absent from the report.
    """

    def __init__(self):
        self._errors: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        """Append a message for a field."""
        self._errors.setdefault(field, []).append(message)

    def get(self, field: str) -> Optional[List[str]]:
        """Return a copy of the messages for a field, or None if it has none."""
        messages = self._errors.get(field)
        return list(messages) if messages is not None else None

    def as_dict(self) -> Dict[str, List[str]]:
        """Return a copy of the full report."""
        return {name: list(messages) for name, messages in self._errors.items()}

    def clear(self) -> None:
        """Discard all messages."""
        self._errors = {}

    def is_empty(self) -> bool:
        """Return True if no field has failed."""
        return not self._errors

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __len__(self) -> int:
        return len(self._errors)


@dataclass
class ValidationResult:
    """
    Container for the outcome of one validation pass.

    Attributes:
        is_valid (bool): Whether every registered rule passed for every field
        errors (Dict[str, List[str]]): Failure messages keyed by field name
        warnings (List[str]): Non-fatal observations, such as plan fields absent from the data
        context (Optional[Dict[str, Any]]): Additional context about the pass
    """

    is_valid: bool
    errors: Dict[str, List[str]]
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    def errors_for(self, field_name: str) -> Optional[List[str]]:
        """Return the messages for one field, or None if it passed."""
        messages = self.errors.get(field_name)
        return list(messages) if messages is not None else None
