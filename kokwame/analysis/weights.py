"""
Weights of syntax node kinds towards the complexity of a function point.

For every one of these constructs a weight is added to the total:
    * every branch of a condition (if / elif / else / case)
    * every iteration
    * every logical operator

Generic binary expressions only count half: not every grammar exposes a
dedicated boolean operator kind, and most binary expressions are arithmetic.
Kinds that are not listed weigh nothing, but their children are still visited.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class MeaningfulKind(str, Enum):
    IF_STATEMENT = "if_statement"
    ELIF_CLAUSE = "elif_clause"
    ELSE_CLAUSE = "else_clause"
    FOR_STATEMENT = "for_statement"
    FOREACH_STATEMENT = "foreach_statement"
    CASE_STATEMENT = "case_statement"
    BOOLEAN_OPERATOR = "boolean_operator"
    BINARY_EXPRESSION = "binary_expression"


_KIND_WEIGHTS = {
    MeaningfulKind.IF_STATEMENT: 1.0,
    MeaningfulKind.ELIF_CLAUSE: 1.0,
    MeaningfulKind.ELSE_CLAUSE: 1.0,
    MeaningfulKind.FOR_STATEMENT: 1.0,
    MeaningfulKind.FOREACH_STATEMENT: 1.0,
    MeaningfulKind.CASE_STATEMENT: 1.0,
    MeaningfulKind.BOOLEAN_OPERATOR: 1.0,
    MeaningfulKind.BINARY_EXPRESSION: 0.5,
}

# Keyed by the raw node type so lookups work on whatever string a grammar emits.
WEIGHTS: Mapping[str, float] = MappingProxyType(
    {kind.value: weight for kind, weight in _KIND_WEIGHTS.items()}
)


def weight_of(kind: str) -> float:
    return WEIGHTS.get(kind, 0.0)
