from __future__ import annotations

from kokwame.analysis.units import iter_descendants
from kokwame.analysis.weights import weight_of

# Every function point has one baseline path through it.
ENTRY_POINT_WEIGHT = 1.0


def complexity(unit) -> float:
    """Cyclomatic-style complexity of a function point.

    Sums the weight of every node below ``unit`` (nested functions
    included) and adds one for the entry point.
    """
    return ENTRY_POINT_WEIGHT + sum(weight_of(node.type) for node in iter_descendants(unit))


class Metric:
    """A numeric measure computed over a function point's subtree."""

    name = "metric"
    label = "Metric"

    def measure(self, unit) -> float:
        return 0.0


class CyclomaticComplexity(Metric):
    name = "cyclomatic_complexity"
    label = "Complexity"

    def measure(self, unit) -> float:
        return complexity(unit)


def format_score(score: float) -> str:
    """Render a score without a trailing ``.0`` for whole numbers."""
    if score == int(score):
        return str(int(score))
    return f"{score:.10g}"
