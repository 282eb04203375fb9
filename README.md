# colossus

Building blocks for running workflow steps: typed workflow components, a
shared heap that substitutes `${{ key }}` references, and runnable nodes
built from their configuration.

## Installing

```
pip install .
```

## Modules

- `colossus.components`: dataclasses for the parts of a workflow
  definition: `WorkflowInput`, `WorkflowNode`, `WorkflowOptions` and
  `WorkflowVariable`. Each has `from_dict` to build it from a parsed
  document (it raises `ValueError` on a missing or wrongly typed field) and
  `to_dict` to turn it back. In the document form a node's and an input's
  type is stored under the key `type`. `WorkflowOptions.concurrency` must be
  an integer from 0 to 2**32 - 1.
- `colossus.heap`: `Heap`, a store of named values. `insert` returns the
  value it replaced, `remove` returns the value it removed, and `get`
  returns `None` for a missing key. `parse` replaces every `${{ key }}` in a
  string with the stored value; references to keys that hold no value are
  left as they are, and values that are not strings come back unchanged.
  `format_value` renders a value the way `parse` inserts it (`true`,
  `false`, `null`, numbers as written, other structures as YAML).
- `colossus.nodes.base`: the abstract `BaseNode` with its `execute` method,
  and `BaseNodeRunOptions`, the heap and key prefix a node runs with.
- `colossus.nodes.log`: `LogNode`, which logs its input as indented JSON at
  INFO level on the `colossus.nodes.log` logger and returns the input as its
  output.
- `colossus.nodes.builder`: `NodeBuilder`, which substitutes heap values
  into a node's input and builds the node. The only node type it knows is
  `Log`.
- `colossus.errors`: `WorkflowError` and its subclasses, among them
  `NodeBuilderError` (no node configuration was given), `InvalidNodeError`
  (unknown node type) and `JsonParseError` (a `LogNode` input could not be
  rendered as JSON).

## Example

```python
from colossus.components import WorkflowNode
from colossus.heap import Heap
from colossus.nodes.base import BaseNodeRunOptions
from colossus.nodes.builder import NodeBuilder

heap = Heap()
heap.insert("name", "World")

config = WorkflowNode("greet", "Log", "Hello ${{name}}")
node = NodeBuilder.from_workflow_node(config).build(heap)
output = node.execute(BaseNodeRunOptions(heap, "greet"))
heap.insert("greet", output)

print(heap.get("greet"))  # Hello World
```

## What this package does not do

It has no command-line program, does not read workflow files from disk, and
has no type for a whole workflow nor a runner that executes a workflow's
nodes in order. Nodes are built and executed one at a time by the caller,
as in the example above.