import pytest

from colossus.components import WorkflowNode
from colossus.errors import InvalidNodeError, NodeBuilderError
from colossus.heap import Heap
from colossus.nodes.builder import NodeBuilder
from colossus.nodes.log import LogNode


def test_node_builder_new():
    builder = NodeBuilder()
    assert builder.workflow_node is None
    assert builder.input is None


def test_node_builder_with_workflow_node():
    node = WorkflowNode("test", "Log", "message")
    builder = NodeBuilder().with_workflow_node(node)
    assert builder.workflow_node.id == node.id
    assert builder.input == "message"


def test_with_workflow_node_leaves_original_builder_unchanged():
    original = NodeBuilder()
    original.with_workflow_node(WorkflowNode("test", "Log", "message"))
    assert original.workflow_node is None
    assert original.input is None


def test_node_builder_with_input():
    builder = NodeBuilder().with_input("custom input")
    assert builder.input == "custom input"


def test_workflow_node_input_replaces_earlier_input():
    node = WorkflowNode("test", "Log", "from node")
    builder = NodeBuilder().with_input("custom").with_workflow_node(node)
    assert builder.input == "from node"


def test_with_input_after_workflow_node_overrides():
    node = WorkflowNode("test", "Log", "from node")
    builder = NodeBuilder().with_workflow_node(node).with_input("custom")
    assert builder.input == "custom"
    heap = Heap()
    built = builder.build(heap)
    assert built == LogNode("custom")


def test_node_builder_build_log_node():
    heap = Heap()
    node = WorkflowNode("log1", "Log", "Hello, World!")
    built = NodeBuilder().with_workflow_node(node).build(heap)
    assert isinstance(built, LogNode)
    assert built.input == "Hello, World!"


def test_node_builder_build_invalid_node():
    heap = Heap()
    node = WorkflowNode("invalid", "InvalidNode", None)
    builder = NodeBuilder().with_workflow_node(node)
    with pytest.raises(InvalidNodeError) as info:
        builder.build(heap)
    assert info.value.node_type == "InvalidNode"


def test_node_type_is_case_sensitive():
    heap = Heap()
    builder = NodeBuilder().with_workflow_node(WorkflowNode("x", "log", None))
    with pytest.raises(InvalidNodeError) as info:
        builder.build(heap)
    assert info.value.node_type == "log"


def test_node_builder_build_no_workflow_node():
    heap = Heap()
    with pytest.raises(NodeBuilderError) as info:
        NodeBuilder().build(heap)
    assert "No workflow node configuration provided" in str(info.value)


def test_node_builder_from_workflow_node():
    node = WorkflowNode("test", "Log", "message")
    builder = NodeBuilder.from_workflow_node(node)
    assert builder.workflow_node.id == node.id
    assert builder.input == "message"


def test_node_builder_with_heap_parsing_plain_braces_unchanged():
    heap = Heap()
    heap.insert("name", "John")
    node = WorkflowNode("log1", "Log", "Hello {{name}}")
    built = NodeBuilder().with_workflow_node(node).build(heap)
    assert built.input == "Hello {{name}}"


def test_node_builder_substitutes_heap_values():
    heap = Heap()
    heap.insert("name", "John")
    node = WorkflowNode("log1", "Log", "Hello ${{name}}")
    built = NodeBuilder().with_workflow_node(node).build(heap)
    assert built.input == "Hello John"


def test_node_builder_keeps_non_string_input():
    heap = Heap()
    node = WorkflowNode("log1", "Log", {"a": 1})
    built = NodeBuilder().with_workflow_node(node).build(heap)
    assert built.input == {"a": 1}