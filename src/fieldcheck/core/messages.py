"""
Default error messages and message formatting.

Templates use ``str.format`` syntax: ``{field}`` is replaced with the field name
and ``{0}``, ``{1}``, ... with the rule parameters.
"""

from typing import Any, Dict, Optional, Sequence

from .exceptions import InvalidParameterError

DEFAULT_MESSAGES: Dict[str, str] = {
    "required": "{field} is required",
    "equals": "{field} must be the same as '{0}'",
    "different": "{field} must be different than '{0}'",
    "accepted": "{field} must be accepted",
    "numeric": "{field} must be numeric",
    "integer": "{field} must be an integer (0-9)",
    "length": "{field} must be {0} characters long",
    "lengthBetween": "{field} must be between {0} and {1} characters",
    "min": "{field} must be at least {0}",
    "max": "{field} must be no more than {0}",
    "in": "{field} contains invalid value",
    "notIn": "{field} contains invalid value",
    "ip": "{field} is not a valid IP address",
    "email": "{field} is not a valid email address",
    "url": "{field} is not a valid URL",
    "urlActive": "{field} must be an active domain",
    "alpha": "{field} must contain only letters a-z",
    "alphaNum": "{field} must contain only letters a-z and/or numbers 0-9",
    "alphaDash": "{field} must contain only letters a-z, numbers 0-9, dashes and underscores",
    "regex": "{field} contains invalid characters",
    "date": "{field} is not a valid date",
    "dateFormat": "{field} must be date with format '{0}'",
    "dateBefore": "{field} must be date before '{0}'",
    "dateAfter": "{field} must be date after '{0}'",
}


def message_key(rule: str, params: Sequence[Any]) -> str:
    """Return the message key for a rule, picking the variant its params imply."""
    if rule == "length" and len(params) > 1 and params[1] is not None:
        return "lengthBetween"
    return rule


def default_message(
    rule: str, params: Sequence[Any], overrides: Optional[Dict[str, str]] = None
) -> Optional[str]:
    """
    Look up the default template for a built-in rule.

    Args:
        rule: Rule name
        params: Rule parameters, used to select a message variant
        overrides: Per-rule templates taking precedence over the built-ins

    Returns:
        The template, or None if the rule has no default
    """
    key = message_key(rule, params)
    overrides = overrides or {}
    for candidate in (key, rule):
        if candidate in overrides:
            return overrides[candidate]
    return DEFAULT_MESSAGES.get(key)


def format_message(template: str, field: str, params: Sequence[Any]) -> str:
    """
    Format a message template for one failing field.

    Raises:
        InvalidParameterError: If the template references a missing placeholder
    """
    try:
        return template.format(*params, field=field)
    except (IndexError, KeyError) as e:
        raise InvalidParameterError(
            f"Message template {template!r} references missing placeholder {e}"
        ) from e
    except ValueError as e:
        raise InvalidParameterError(f"Malformed message template {template!r}: {e}") from e
