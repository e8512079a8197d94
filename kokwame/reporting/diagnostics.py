"""
Diagnostics for function points that are too complex.

A DiagnosticProducer turns an analysis pass into diagnostic entries and
publishes them into a DiagnosticStore, one list per buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List

from kokwame.analysis.report import UnitInfo, analyze, problematic
from kokwame.analysis.severity import Severity
from kokwame.core.config import Options
from kokwame.core.errors import KokwameError

logger = logging.getLogger(__name__)

PLUGIN_NAME = "Kokwame"


@dataclass(frozen=True)
class Diagnostic:
    lnum: int
    col: int
    end_lnum: int
    end_col: int
    severity: Severity
    message: str
    source: str = PLUGIN_NAME

    def to_dict(self) -> dict:
        return {
            "lnum": self.lnum,
            "col": self.col,
            "end_lnum": self.end_lnum,
            "end_col": self.end_col,
            "severity": self.severity.lsp_code,
            "message": self.message,
            "source": self.source,
        }


def to_diagnostic(info: UnitInfo) -> Diagnostic:
    # Anchored on the name so the editor underlines the identifier only.
    start, end = info.name_range.start, info.name_range.end
    return Diagnostic(
        lnum=start.row,
        col=start.column,
        end_lnum=end.row,
        end_col=end.column,
        severity=info.severity,
        message=info.message,
    )


def to_diagnostics(report: Iterable[UnitInfo]) -> List[Diagnostic]:
    return [to_diagnostic(info) for info in report]


class DiagnosticStore:
    """Published diagnostics of one namespace, keyed by buffer."""

    def __init__(self, namespace: str = PLUGIN_NAME) -> None:
        self.namespace = namespace
        self._entries: Dict[Hashable, List[Diagnostic]] = {}

    def set(self, buffer: Hashable, diagnostics: Iterable[Diagnostic]) -> None:
        self._entries[buffer] = list(diagnostics)

    def get(self, buffer: Hashable) -> List[Diagnostic]:
        return list(self._entries.get(buffer, []))

    def clear(self, buffer: Hashable) -> None:
        self._entries.pop(buffer, None)


class DiagnosticProducer:
    def __init__(self, options: Options, store: DiagnosticStore) -> None:
        self.options = options
        self.store = store

    def diagnostics_for(self, root) -> List[Diagnostic]:
        report = analyze(root, self.options.threshold_low, self.options.threshold_high)
        return to_diagnostics(problematic(report, self.options.threshold_low))

    def refresh(self, buffer: Hashable, tree_provider) -> bool:
        """Republish the diagnostics of ``buffer``.

        A pass that cannot read the source or hits a function point
        without a resolvable name is abandoned and the diagnostics of
        the previous pass stay in place.
        """
        try:
            diagnostics = self.diagnostics_for(tree_provider.current_tree())
        except KokwameError as exc:
            logger.error("Diagnostics for %s not updated: %s", buffer, exc)
            return False
        self.store.set(buffer, diagnostics)
        logger.debug("Published %d diagnostic(s) for %s", len(diagnostics), buffer)
        return True
