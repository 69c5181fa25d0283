"""
Field store for validator input.

The field store holds the filtered snapshot of input data that a validator
operates over. Values are opaque to the store; only rules inspect them.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Optional


class FieldStore:
    """
    Filtered snapshot of the input mapping.

    When ``allowed_fields`` is given and non-empty, only fields whose name
    appears in it are kept; other fields are dropped silently. The store keeps
    its own shallow copy, so later changes to the source mapping are not seen.

    Example:
        >>> store = FieldStore({"name": "Ada", "admin": True}, ["name"])
        >>> store.all()
        {'name': 'Ada'}
        >>> store.get("admin") is None
        True
    """

    def __init__(self, data: Mapping, allowed_fields: Optional[Iterable[str]] = None):
        if not isinstance(data, Mapping):
            raise TypeError(f"data must be a mapping, got {type(data).__name__}")

        allowed = set(allowed_fields or ())
        self._fields: Dict[str, Any] = {
            name: value for name, value in data.items() if not allowed or name in allowed
        }

    def get(self, field: str) -> Any:
        """Return the value of ``field``, or None if it is absent."""
        return self._fields.get(field)

    def has(self, field: str) -> bool:
        """Return True if ``field`` is present and its value is not None."""
        return self._fields.get(field) is not None

    def all(self) -> Dict[str, Any]:
        """Return a copy of the filtered mapping."""
        return dict(self._fields)

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)
