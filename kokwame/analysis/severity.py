from __future__ import annotations

from enum import Enum

DEFAULT_LOW = 7
DEFAULT_HIGH = 12


class Severity(Enum):
    """Severity tiers of a complexity score."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def lsp_code(self) -> int:
        # LSP DiagnosticSeverity: 1 error, 2 warning, 3 information.
        return {Severity.ERROR: 1, Severity.WARNING: 2, Severity.INFO: 3}[self]

    def __lt__(self, other):
        order = [Severity.INFO, Severity.WARNING, Severity.ERROR]
        return order.index(self) < order.index(other)

    def __le__(self, other):
        return self == other or self < other


def severity_of(score: float, low: float = DEFAULT_LOW, high: float = DEFAULT_HIGH) -> Severity:
    if score > high:
        return Severity.ERROR
    if score > low:
        return Severity.WARNING
    return Severity.INFO


def is_problematic(score: float, low: float = DEFAULT_LOW) -> bool:
    return score > low
