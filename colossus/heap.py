"""Shared data store for workflow runs, with `${{key}}` substitution."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

import yaml

_PLACEHOLDER = re.compile(r"\$\{\{([^}]+)\}\}")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    return repr(value)


def format_value(value: Any) -> str:
    """Render a document value the way it is substituted into a template."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if value is None:
        return "null"
    try:
        return yaml.safe_dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError:
        return ""


class Heap:
    """Named values shared between the nodes of a workflow run.

    A key may be present with the value ``None``, which stands for a node
    that produced nothing; such a key is never substituted into templates.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if data is not None:
            for key, value in data.items():
                self.insert(key, value)

    def get(self, key: str) -> Any:
        """Return the value stored under `key`, or None."""
        return self._data.get(key)

    def insert(self, key: str, value: Any) -> Any:
        """Store `value` under `key` and return the value it replaced, if any."""
        if not isinstance(key, str):
            raise TypeError("heap keys must be strings")
        previous = self._data.get(key)
        self._data[key] = value
        return previous

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def remove(self, key: str) -> Any:
        """Remove `key` and return its value, or None when it was absent."""
        return self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def parse(self, value: Any) -> Any:
        """Substitute `${{key}}` references in a string with heap values.

        Values that are not strings are returned unchanged, as are references
        to keys that hold no value.
        """
        if not isinstance(value, str):
            return value
        result = value
        for match in _PLACEHOLDER.finditer(value):
            found = self.get(match.group(1).strip())
            if found is not None:
                result = result.replace(match.group(0), format_value(found))
        return result

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the stored entries."""
        return dict(self._data)

    def __repr__(self) -> str:
        return f"Heap({self._data!r})"