"""Building blocks of a workflow definition: inputs, nodes, options, variables."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_U32_MAX = 2**32 - 1


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type for {what}: expected a mapping")
    return data


def _required_str(data: Mapping[str, Any], key: str, what: str) -> str:
    if key not in data:
        raise ValueError(f"{what}: missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{what}: field `{key}` must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str, what: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{what}: field `{key}` must be a string")
    return value


@dataclass
class WorkflowInput:
    """An input parameter a workflow expects, with an optional default."""

    name: str
    input_type: str
    default: Any = None

    @classmethod
    def with_default(cls, name: str, input_type: str, default: Any) -> WorkflowInput:
        """Create an input that carries a default value."""
        return cls(name, input_type, default)

    @classmethod
    def from_dict(cls, data: Any) -> WorkflowInput:
        """Build an input from its parsed document form."""
        mapping = _mapping(data, "workflow input")
        return cls(
            name=_required_str(mapping, "name", "workflow input"),
            input_type=_required_str(mapping, "type", "workflow input"),
            default=mapping.get("default"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the document form of this input."""
        return {"name": self.name, "type": self.input_type, "default": self.default}


@dataclass
class WorkflowNode:
    """A single step of a workflow."""

    id: str
    node_type: str
    input: Any = None
    when: str | None = None

    @classmethod
    def with_condition(
        cls, id: str, node_type: str, input: Any, when: str
    ) -> WorkflowNode:
        """Create a node that runs only when `when` holds."""
        return cls(id, node_type, input, when)

    def has_condition(self) -> bool:
        """True when the node carries a condition."""
        return self.when is not None

    @classmethod
    def from_dict(cls, data: Any) -> WorkflowNode:
        """Build a node from its parsed document form."""
        mapping = _mapping(data, "workflow node")
        return cls(
            id=_required_str(mapping, "id", "workflow node"),
            node_type=_required_str(mapping, "type", "workflow node"),
            input=mapping.get("input"),
            when=_optional_str(mapping, "when", "workflow node"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the document form of this node."""
        return {
            "id": self.id,
            "type": self.node_type,
            "input": self.input,
            "when": self.when,
        }


def _check_concurrency(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("workflow options: `concurrency` must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(
            f"workflow options: `concurrency` must be between 0 and {_U32_MAX}"
        )
    return value


@dataclass
class WorkflowOptions:
    """Execution settings of a workflow."""

    concurrency: int | None = None

    def __post_init__(self) -> None:
        if self.concurrency is not None:
            _check_concurrency(self.concurrency)

    @classmethod
    def with_concurrency(cls, concurrency: int) -> WorkflowOptions:
        """Create options limited to `concurrency` simultaneous nodes."""
        return cls(concurrency)

    def with_concurrency_limit(self, concurrency: int) -> WorkflowOptions:
        """Return a copy with the concurrency limit set."""
        return dataclasses.replace(self, concurrency=concurrency)

    def concurrency_or(self, default: int) -> int:
        """Return the concurrency limit, or `default` when none is set."""
        return default if self.concurrency is None else self.concurrency

    def has_concurrency_limit(self) -> bool:
        """True when a concurrency limit is set."""
        return self.concurrency is not None

    @classmethod
    def from_dict(cls, data: Any) -> WorkflowOptions:
        """Build options from their parsed document form."""
        mapping = _mapping(data, "workflow options")
        value = mapping.get("concurrency")
        return cls(None if value is None else _check_concurrency(value))

    def to_dict(self) -> dict[str, Any]:
        """Return the document form of these options."""
        return {"concurrency": self.concurrency}


@dataclass
class WorkflowVariable:
    """A named value available throughout a workflow."""

    name: str
    value: Any

    @classmethod
    def from_dict(cls, data: Any) -> WorkflowVariable:
        """Build a variable from its parsed document form."""
        mapping = _mapping(data, "workflow variable")
        name = _required_str(mapping, "name", "workflow variable")
        if "value" not in mapping:
            raise ValueError("workflow variable: missing field `value`")
        return cls(name, mapping["value"])

    def to_dict(self) -> dict[str, Any]:
        """Return the document form of this variable."""
        return {"name": self.name, "value": self.value}