"""Construction of runnable nodes from their workflow configuration."""

from __future__ import annotations

import copy
from typing import Any

from colossus.components import WorkflowNode
from colossus.errors import InvalidNodeError, NodeBuilderError
from colossus.heap import Heap
from colossus.nodes.base import BaseNode
from colossus.nodes.log import LogNode


class NodeBuilder:
    """Fluent builder that turns a node configuration into a runnable node."""

    def __init__(self) -> None:
        self.workflow_node: WorkflowNode | None = None
        self.input: Any = None

    def __repr__(self) -> str:
        return f"NodeBuilder(workflow_node={self.workflow_node!r}, input={self.input!r})"

    @classmethod
    def from_workflow_node(cls, workflow_node: WorkflowNode) -> NodeBuilder:
        """Create a builder preset with a node configuration."""
        return cls().with_workflow_node(workflow_node)

    def with_workflow_node(self, workflow_node: WorkflowNode) -> NodeBuilder:
        """Return a copy using `workflow_node` and taking over its input."""
        builder = copy.copy(self)
        builder.input = workflow_node.input
        builder.workflow_node = workflow_node
        return builder

    def with_input(self, input: Any) -> NodeBuilder:
        """Return a copy using `input` as the node input."""
        builder = copy.copy(self)
        builder.input = input
        return builder

    def build(self, heap: Heap) -> BaseNode:
        """Build the node, substituting heap values into its input.

        Raises NodeBuilderError when no configuration was given and
        InvalidNodeError when the node type is not known.
        """
        input = heap.parse(self.input)
        if self.workflow_node is None:
            raise NodeBuilderError("No workflow node configuration provided")
        node_type = self.workflow_node.node_type
        if node_type == "Log":
            return LogNode(input)
        raise InvalidNodeError(node_type)