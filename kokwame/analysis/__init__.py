from kokwame.analysis.complexity import CyclomaticComplexity
from kokwame.analysis.report import UnitInfo, analyze, build_info, problematic, unit_containing
from kokwame.analysis.severity import Severity, is_problematic, severity_of
from kokwame.analysis.units import find_name_node, find_units, is_relevant_unit
from kokwame.analysis.weights import weight_of

__all__ = [
    "CyclomaticComplexity",
    "Severity",
    "UnitInfo",
    "analyze",
    "build_info",
    "find_name_node",
    "find_units",
    "is_problematic",
    "is_relevant_unit",
    "problematic",
    "severity_of",
    "unit_containing",
    "weight_of",
]
