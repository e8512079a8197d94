from __future__ import annotations

from typing import Iterator, List

from kokwame.core.errors import NameNotFound
from kokwame.utils.location import range_of


# Node types that are considered to be function points.
UNIT_NODE_TYPES = frozenset({"function_definition", "method_declaration"})

# Node types that hold the name of a function point.
NAME_NODE_TYPES = frozenset({"identifier", "name"})

# Wrappers some grammars put around the name, e.g. C's function_declarator.
DECLARATOR_NODE_TYPES = frozenset({"function_declarator"})


def iter_nodes(node) -> Iterator[object]:
    """Yield ``node`` and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_descendants(node) -> Iterator[object]:
    nodes = iter_nodes(node)
    next(nodes)
    return nodes


def is_relevant_unit(node) -> bool:
    return node.type in UNIT_NODE_TYPES


def find_units(root) -> List[object]:
    """
    Collect every function point below (and including) ``root``.

    Finding a function point does not stop the walk: nested functions
    are reported as well, after the function that encloses them.
    """
    return [node for node in iter_nodes(root) if is_relevant_unit(node)]


def find_name_node(unit):
    """
    Return the identifier node of a function point.

    Only direct children are searched, except that a declarator child is
    descended into. Anything nested deeper raises NameNotFound.
    """
    for child in unit.children:
        if child.type in NAME_NODE_TYPES:
            return child
        if child.type in DECLARATOR_NODE_TYPES:
            return find_name_node(child)
    raise NameNotFound(unit.type, range_of(unit))
