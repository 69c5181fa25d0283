"""
Validation reporter components.

This module provides components for formatting and outputting validation
results in various formats:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization

Rendering for end users (templates, localization) is left to callers; these
formats are meant for logs, debugging and API responses.
"""

import json
from typing import Any, Dict

from ..core.report import ValidationResult


class ValidationReporter:
    """
    Reporter for formatting and outputting validation results.

    This class provides static methods for converting ValidationResult instances
    into various formats suitable for different use cases.
    """

    @staticmethod
    def format_result(result: ValidationResult) -> str:
        """
        Format a validation result as a human-readable string.

        Args:
            result: ValidationResult instance to format

        Returns:
            str: Formatted string representation of the validation result

        Example:
            >>> result = ValidationResult(False, {"age": ["age must be numeric"]}, [])
            >>> print(ValidationReporter.format_result(result))
            Validation failed with the following errors:
              age:
                - age must be numeric
        """
        lines = []

        if not result.is_valid:
            lines.append("Validation failed with the following errors:")
            for field, messages in result.errors.items():
                lines.append(f"  {field}:")
                for message in messages:
                    lines.append(f"    - {message}")

        if result.warnings:
            lines.append("\nWarnings:")
            for warning in result.warnings:
                lines.append(f"  - {warning}")

        if result.context:
            lines.append("\nContext:")
            for key, value in result.context.items():
                lines.append(f"  {key}: {value}")

        if not lines:
            lines.append("Validation passed successfully")

        return "\n".join(lines)

    @staticmethod
    def to_dict(result: ValidationResult) -> Dict[str, Any]:
        """
        Convert a validation result to a dictionary.

        Example:
            >>> result = ValidationResult(True, {}, [], {"rules": ["required"]})
            >>> ValidationReporter.to_dict(result)
            {'is_valid': True, 'errors': {}, 'warnings': [], 'context': {'rules': ['required']}}
        """
        return {
            "is_valid": result.is_valid,
            "errors": {field: list(messages) for field, messages in result.errors.items()},
            "warnings": list(result.warnings),
            "context": result.context,
        }

    @staticmethod
    def to_json(result: ValidationResult) -> str:
        """
        Convert a validation result to JSON.

        Values that JSON cannot represent natively, such as dates in the
        context, are written using their string form.
        """
        return json.dumps(ValidationReporter.to_dict(result), indent=2, default=str)
