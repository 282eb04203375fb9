"""The node interface and the context a node runs in."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from colossus.heap import Heap


@dataclass(frozen=True)
class BaseNodeRunOptions:
    """The heap and key prefix a node executes with."""

    heap: Heap
    prefix: str

    def with_heap(self, heap: Heap) -> BaseNodeRunOptions:
        """Return a copy using another heap."""
        return dataclasses.replace(self, heap=heap)

    def with_prefix(self, prefix: str) -> BaseNodeRunOptions:
        """Return a copy using another prefix."""
        return dataclasses.replace(self, prefix=prefix)


class BaseNode(ABC):
    """A runnable workflow step."""

    @abstractmethod
    def execute(self, options: BaseNodeRunOptions) -> Any:
        """Run the node and return its output value.

        Implementations raise a workflow error when the node fails.
        """