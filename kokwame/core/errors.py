"""
Error types raised by Kokwame.

Every error carries structured fields so callers can match on them
instead of parsing the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kokwame.utils.location import Range


class KokwameError(Exception):
    """Base class for all Kokwame errors."""


class NameNotFound(KokwameError):
    """A function point has no identifier the locator can resolve."""

    def __init__(self, node_kind: str, node_range: "Range") -> None:
        self.node_kind = node_kind
        self.node_range = node_range
        start, end = node_range.start, node_range.end
        super().__init__(
            f"Cannot find the name node [{node_kind} "
            f"({start.row + 1}, {start.column}) -> ({end.row + 1}, {end.column})]"
        )


class ConfigError(KokwameError):
    """Invalid configuration."""


class UnknownOption(ConfigError):
    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unknown option [{option}]")


class SourceError(KokwameError):
    """A source file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read source file {path}: {reason}")
