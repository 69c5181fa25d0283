"""
Date rules.

Free-form dates are parsed with ``dateutil``; ``dateFormat`` uses strict
``datetime.strptime`` format codes. Comparisons are made on POSIX timestamps,
with naive datetimes taken as local time.

Relative expressions are understood as well: an optional anchor (``now``,
``today``, ``midnight``, ``tomorrow``, ``yesterday``) followed by any number
of signed offsets such as ``+1 week`` or ``-3 days``. Day anchors resolve to
midnight; a bare offset counts from now.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Any, List, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..core.exceptions import InvalidParameterError
from ..core.types import RuleContext
from .base import BuiltinRule, param

DAY_ANCHORS = {"today": 0, "midnight": 0, "tomorrow": 1, "yesterday": -1}
UNITS = r"(?:second|minute|hour|day|week|month|year)"
RELATIVE_PATTERN = re.compile(
    rf"(now|today|midnight|tomorrow|yesterday)?((?:\s*[+-]?\d+\s*{UNITS}s?)*)",
    re.IGNORECASE,
)
OFFSET_PATTERN = re.compile(rf"([+-]?\d+)\s*({UNITS})", re.IGNORECASE)


def parse_relative(text: str, now: datetime) -> Optional[datetime]:
    """
    Resolve a relative date expression against a reference time.

    Args:
        text: Expression such as ``"now"``, ``"tomorrow"`` or ``"today +2 weeks"``
        now: Reference time

    Returns:
        The resolved datetime, or None if the text is not a relative expression
    """
    match = RELATIVE_PATTERN.fullmatch(text.strip())
    if match is None or not (match.group(1) or match.group(2).strip()):
        return None

    anchor = (match.group(1) or "now").lower()
    if anchor == "now":
        moment = now
    else:
        moment = datetime.combine(now.date(), time(), now.tzinfo)
        moment += timedelta(days=DAY_ANCHORS[anchor])

    for amount, unit in OFFSET_PATTERN.findall(match.group(2)):
        moment += relativedelta(**{f"{unit.lower()}s": int(amount)})
    return moment


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a value as a datetime.

    Args:
        value: A datetime, a date, a relative expression, or a string
            understood by dateutil

    Returns:
        The parsed datetime, or None if the value is not a date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        moment = parse_relative(value, datetime.now())
        if moment is not None:
            return moment
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def _bound(params: List[Any], rule: str) -> float:
    raw = param(params, 0, rule)
    moment = parse_date(raw)
    if moment is None:
        raise InvalidParameterError(f"Rule '{rule}' expects a date parameter, got {raw!r}")
    return moment.timestamp()


def validate_date(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    return parse_date(value) is not None


def validate_date_format(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    """Pass if the value parses with the strptime format in params[0], exactly."""
    fmt = param(params, 0, "dateFormat")
    if not isinstance(fmt, str):
        raise InvalidParameterError(
            f"Rule 'dateFormat' expects a format string, got {type(fmt).__name__}"
        )
    if not isinstance(value, str):
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


def validate_date_before(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    bound = _bound(params, "dateBefore")
    moment = parse_date(value)
    return moment is not None and moment.timestamp() < bound


def validate_date_after(field: str, value: Any, params: List[Any], context: RuleContext) -> bool:
    bound = _bound(params, "dateAfter")
    moment = parse_date(value)
    return moment is not None and moment.timestamp() > bound


RULES = [
    BuiltinRule("date", validate_date),
    BuiltinRule("dateFormat", validate_date_format, min_params=1),
    BuiltinRule("dateBefore", validate_date_before, min_params=1),
    BuiltinRule("dateAfter", validate_date_after, min_params=1),
]
