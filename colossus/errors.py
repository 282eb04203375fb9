"""Errors raised while loading and running workflows."""

from __future__ import annotations

import os
from pathlib import Path


class WorkflowError(Exception):
    """Base class of every error a workflow run can raise."""


class FileReadError(WorkflowError):
    """The workflow file could not be read."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Failed to read workflow file: {cause}")


class JsonParseError(WorkflowError):
    """JSON content could not be parsed or produced."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Failed to parse JSON workflow file: {cause}")


class YamlParseError(WorkflowError):
    """YAML content could not be parsed or produced."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Failed to parse YAML workflow file: {cause}")


class UnsupportedFormatError(WorkflowError):
    """The workflow file has an extension that is not understood."""

    def __init__(self) -> None:
        super().__init__(
            "Unsupported file format. Expected .json, .yml, or .yaml extension"
        )


class WorkflowNotFoundError(WorkflowError):
    """The workflow file does not exist."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"Workflow file not found: {os.fspath(path)}")


class NodeBuilderError(WorkflowError):
    """A node could not be built from its configuration."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Node builder error: {message}")


class NodeExecutionError(WorkflowError):
    """A node failed while executing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Node execution failed: {message}")


class InvalidNodeError(WorkflowError):
    """A node names a type that no node implementation handles."""

    def __init__(self, node_type: str) -> None:
        self.node_type = node_type
        super().__init__(f"Invalid node type: {node_type}")