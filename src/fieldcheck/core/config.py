"""
Validator configuration.

Configuration is passed explicitly to each validator; nothing is read from the
environment.
"""

from typing import Dict, Optional


class ValidatorConfig:
    """
    Configuration for a validator instance.

    Attributes:
        dns_timeout: Seconds to wait for the DNS lookup made by ``urlActive``
        messages: Per-rule default message templates, overriding built-in defaults
        default_message: Template used for rules that have no default message
        warn_missing_fields: Whether results list plan fields absent from the data
    """

    def __init__(
        self,
        dns_timeout: float = 5.0,
        messages: Optional[Dict[str, str]] = None,
        default_message: str = "{field} is invalid",
        warn_missing_fields: bool = True,
    ):
        if dns_timeout <= 0:
            raise ValueError("dns_timeout must be positive")
        self.dns_timeout = dns_timeout
        self.messages: Dict[str, str] = dict(messages or {})
        self.default_message = default_message
        self.warn_missing_fields = warn_missing_fields
