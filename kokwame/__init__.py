"""
Kokwame

Code quality metrics for the functions and methods of a source file,
computed on its tree-sitter syntax tree.
"""

__version__ = "0.2.0"

from kokwame.analysis import Severity, UnitInfo, analyze, problematic, unit_containing
from kokwame.core.config import Border, Options
from kokwame.core.errors import ConfigError, KokwameError, NameNotFound, SourceError, UnknownOption
from kokwame.session import Kokwame, setup

__all__ = [
    "Border",
    "ConfigError",
    "Kokwame",
    "KokwameError",
    "NameNotFound",
    "Options",
    "Severity",
    "SourceError",
    "UnitInfo",
    "UnknownOption",
    "analyze",
    "problematic",
    "setup",
    "unit_containing",
]
