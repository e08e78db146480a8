from typing import List, Tuple

from .models import (
    Abstraction,
    Application,
    Binding,
    DoubleArity,
    MapAbstraction,
    Number,
    Program,
    ScalarId,
    SingleArity,
    TripleArity,
    Variable,
    Vector,
    VectorId,
)


def describe_identifier(identifier) -> str:
    if isinstance(identifier, VectorId):
        return f"\\vec{{{identifier.name}}}"
    if isinstance(identifier, ScalarId):
        return identifier.name
    raise TypeError(f"not an identifier: {identifier!r}")


def format_tree(node) -> str:
    """Render a program or expression one node per line, children indented."""
    lines: List[str] = []
    pending = [(node, 0)]
    while pending:
        node, depth = pending.pop()
        label, children = _describe(node)
        lines.append("  " * depth + label)
        pending.extend((child, depth + 1) for child in reversed(children))
    return "\n".join(lines)


def _describe(node) -> Tuple[str, list]:
    children = []

    if isinstance(node, Program):
        label = f"Program ({len(node.statements)} statements)"
        children = list(node.statements)
    elif isinstance(node, Number):
        label = f"Number {node.value!r}"
    elif isinstance(node, Variable):
        label = f"Variable {describe_identifier(node.identifier)}"
    elif isinstance(node, Application):
        label = "Application"
        children = [node.callee, node.argument]
    elif isinstance(node, Vector):
        label = f"Vector ({len(node.items)} items)"
        children = list(node.items)
    elif isinstance(node, SingleArity):
        label = f"SingleArity {node.op.name}"
        children = [node.operand]
    elif isinstance(node, DoubleArity):
        label = f"DoubleArity {node.op.name}"
        children = [node.left, node.right]
    elif isinstance(node, TripleArity):
        label = f"TripleArity {node.op.name}"
        children = [node.first, node.second, node.third]
    elif isinstance(node, Abstraction):
        label = f"Abstraction {describe_identifier(node.parameter)}"
        children = [node.body]
    elif isinstance(node, MapAbstraction):
        label = f"MapAbstraction {describe_identifier(node.parameter)} index {node.index_name}"
        children = [node.body]
    elif isinstance(node, Binding):
        label = f"Binding {describe_identifier(node.variable)}"
        children = [node.value]
    else:
        raise TypeError(f"cannot format {type(node).__name__}")

    return label, children
