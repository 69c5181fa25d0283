"""
Network address rules.

Rules:
- ip: IPv4 or IPv6 address
- email: syntactically valid e-mail address
- url: syntactically valid URL
- urlActive: host part resolves in DNS

The ``urlActive`` lookup is blocking I/O bounded by ``ValidatorConfig.dns_timeout``.
A failed or timed-out lookup fails validation; resolver outages cannot be told
apart from hosts that do not exist. The lookup goes through the system resolver
(``socket.getaddrinfo``), so only address records (A/AAAA, or CNAMEs leading to
them) count: a domain that publishes only MX or TXT records fails.
"""

import ipaddress
import logging
import re
import socket
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, List
from urllib.parse import urlsplit

from ..core.types import RuleContext
from .base import BuiltinRule

logger = logging.getLogger(__name__)

EMAIL_LOCAL_PATTERN = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
)
DOMAIN_LABEL = r"[A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
EMAIL_DOMAIN_PATTERN = re.compile(rf"{DOMAIN_LABEL}(\.{DOMAIN_LABEL})+")
HOST_LABEL = r"[A-Za-z0-9_]([A-Za-z0-9_-]*[A-Za-z0-9_])?"
URL_HOST_PATTERN = re.compile(rf"{HOST_LABEL}(\.{HOST_LABEL})*\.?")
PATH_ONLY_SCHEMES = ("mailto", "news", "file")
ACTIVE_URL_PREFIXES = ("http://", "https://", "ftp://")


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def validate_ip(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    return isinstance(value, str) and _is_ip(value)


def validate_email(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    if not isinstance(value, str) or len(value) > 254 or value.count("@") != 1:
        return False

    local, domain = value.split("@")
    if len(local) > 64 or not EMAIL_LOCAL_PATTERN.fullmatch(local):
        return False
    if domain.startswith("[") and domain.endswith("]"):
        literal = domain[1:-1]
        if literal.lower().startswith("ipv6:"):
            literal = literal[5:]
        return _is_ip(literal)
    return EMAIL_DOMAIN_PATTERN.fullmatch(domain) is not None


def validate_url(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    if not isinstance(value, str) or not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError for a malformed port
    except ValueError:
        return False

    if not parts.scheme:
        return False
    if parts.scheme in PATH_ONLY_SCHEMES:
        return bool(parts.path or parts.netloc)

    host = parts.hostname
    if not host:
        return False
    return _is_ip(host) or URL_HOST_PATTERN.fullmatch(host) is not None


def resolve_host(host: str, timeout: float) -> bool:
    """
    Check whether a host name has a DNS address record.

    MX-only and TXT-only domains are reported as unresolvable.

    Args:
        host: Host name to look up
        timeout: Seconds to wait before giving up

    Returns:
        bool: True if the lookup returned at least one address
    """
    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(socket.getaddrinfo, host, None)
    try:
        return bool(future.result(timeout=timeout))
    except FuturesTimeoutError:
        logger.warning(f"DNS lookup for {host} timed out after {timeout}s")
        return False
    except (OSError, UnicodeError) as e:
        logger.debug(f"DNS lookup for {host} failed: {str(e)}")
        return False
    finally:
        executor.shutdown(wait=False)


def validate_url_active(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    if not isinstance(value, str):
        return False

    remainder = value.strip().lower()
    for prefix in ACTIVE_URL_PREFIXES:
        if remainder.startswith(prefix):
            remainder = remainder[len(prefix):]
            break
    try:
        host = urlsplit("//" + remainder.split("/", 1)[0]).hostname
    except ValueError:
        return False
    if not host:
        return False
    return resolve_host(host, context.config.dns_timeout)


RULES = [
    BuiltinRule("ip", validate_ip),
    BuiltinRule("email", validate_email),
    BuiltinRule("url", validate_url),
    BuiltinRule("urlActive", validate_url_active),
]
