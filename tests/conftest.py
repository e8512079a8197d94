"""
Shared helpers: a minimal in-memory stand-in for tree-sitter nodes.
"""


class FakeNode:
    """Exposes the node attributes the analysis reads from tree-sitter nodes."""

    def __init__(self, type, children=None, start=(0, 0), end=(0, 0), text=b""):
        self.type = type
        self.children = list(children or [])
        self.start_point = start
        self.end_point = end
        self.text = text

    def __repr__(self):
        return f"FakeNode({self.type!r}, {self.start_point}->{self.end_point})"


def make_node(type, *children, start=(0, 0), end=(0, 0), text=b""):
    return FakeNode(type, children, start=start, end=end, text=text)


def make_unit(name, *body, start_row=0, end_row=0, kind="function_definition"):
    """A function point whose body holds ``body`` nodes."""
    identifier = make_node(
        "identifier",
        start=(start_row, 4),
        end=(start_row, 4 + len(name)),
        text=name.encode("utf-8"),
    )
    block = make_node("block", *body, start=(start_row + 1, 4), end=(end_row, 0))
    return make_node(kind, identifier, block, start=(start_row, 0), end=(end_row, 0))


def make_body(*kinds):
    return [make_node(kind) for kind in kinds]
