"""
Per function point records and the report built from a syntax tree.

A report is a list of UnitInfo in the pre-order in which the function
points were found. Records are recomputed from scratch on every pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from kokwame.analysis.complexity import CyclomaticComplexity, Metric, format_score
from kokwame.analysis.severity import DEFAULT_HIGH, DEFAULT_LOW, Severity, is_problematic, severity_of
from kokwame.analysis.units import find_name_node, find_units
from kokwame.utils.location import Position, Range, range_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitInfo:
    name: str
    name_range: Range
    unit_range: Range
    score: float
    severity: Severity
    label: str = CyclomaticComplexity.label

    @property
    def message(self) -> str:
        return f"{self.label}: {format_score(self.score)}"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "name_range": list(self.name_range.as_tuple()),
            "unit_range": list(self.unit_range.as_tuple()),
            "score": self.score,
            "severity": self.severity.value,
            "message": self.message,
        }


def build_info(
    unit,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    metric: Optional[Metric] = None,
) -> UnitInfo:
    """Build the record of one function point.

    Raises NameNotFound when the function point has no resolvable name.
    """
    metric = metric or CyclomaticComplexity()
    identifier = find_name_node(unit)
    name = identifier.text.decode("utf-8", errors="replace")
    score = metric.measure(unit)
    return UnitInfo(
        name=name,
        name_range=range_of(identifier),
        unit_range=range_of(unit),
        score=score,
        severity=severity_of(score, low, high),
        label=metric.label,
    )


def analyze(
    root,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    metric: Optional[Metric] = None,
) -> List[UnitInfo]:
    """Build the records of every function point in the tree under ``root``.

    A missing tree (``None``) yields an empty report. NameNotFound from
    any function point aborts the whole report.
    """
    if root is None:
        return []
    report = [build_info(unit, low, high, metric) for unit in find_units(root)]
    logger.debug("Analyzed %d function point(s)", len(report))
    return report


def problematic(report: Iterable[UnitInfo], low: float = DEFAULT_LOW) -> List[UnitInfo]:
    return [info for info in report if is_problematic(info.score, low)]


def unit_containing(report: Iterable[UnitInfo], position: Position) -> Optional[UnitInfo]:
    """
    Return the first record in report order whose unit spans the row of
    ``position``. With nested functions that is the outermost one.
    """
    for info in report:
        if info.unit_range.contains(position):
            return info
    return None
