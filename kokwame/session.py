"""
Command surface of Kokwame.

The host editor is reached through three small interfaces: a tree provider
for the current buffer, a position provider for the cursor and a presenter
that renders popups and notices. ``setup()`` wires them to the analysis
and returns a session holding the registered commands.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Mapping, Optional, Protocol, Tuple, Union

from kokwame.analysis.report import UnitInfo, analyze, unit_containing
from kokwame.core.config import Options
from kokwame.reporting.diagnostics import DiagnosticProducer, DiagnosticStore
from kokwame.utils.location import Position

logger = logging.getLogger(__name__)

NO_UNIT_NOTICE = "Kokwame: Cannot gather metrics; cursor is not inside a function point."


class TreeProvider(Protocol):
    def current_tree(self) -> Optional[Any]:
        ...


class PositionProvider(Protocol):
    def cursor_position(self) -> Tuple[int, int]:
        ...


class Presenter(Protocol):
    def show_info(self, info: UnitInfo) -> None:
        ...

    def notify(self, message: str) -> None:
        ...


class Kokwame:
    def __init__(
        self,
        options: Options,
        tree_provider: TreeProvider,
        position_provider: PositionProvider,
        presenter: Presenter,
        store: Optional[DiagnosticStore] = None,
    ) -> None:
        self.options = options
        self.tree_provider = tree_provider
        self.position_provider = position_provider
        self.presenter = presenter
        self.store = store or DiagnosticStore()
        self.producer = DiagnosticProducer(options, self.store)
        self.commands: Dict[str, Callable[[], Any]] = {"KokwameInfo": self.info}

    def report(self):
        return analyze(
            self.tree_provider.current_tree(),
            self.options.threshold_low,
            self.options.threshold_high,
        )

    def info(self) -> Optional[UnitInfo]:
        """Show the metrics of the function point under the cursor."""
        row, column = self.position_provider.cursor_position()
        info = unit_containing(self.report(), Position(row, column))
        if info is None:
            self.presenter.notify(NO_UNIT_NOTICE)
            return None
        self.presenter.show_info(info)
        return info

    def publish_diagnostics(self, buffer: Hashable) -> bool:
        if not self.options.is_diagnostic_producer:
            return False
        return self.producer.refresh(buffer, self.tree_provider)


def setup(
    options: Union[Options, Mapping[str, Any], None] = None,
    *,
    tree_provider: TreeProvider,
    position_provider: PositionProvider,
    presenter: Presenter,
    store: Optional[DiagnosticStore] = None,
) -> Kokwame:
    if not isinstance(options, Options):
        options = Options.from_mapping(options)
    logger.debug("Kokwame set up with %s", options.to_dict())
    return Kokwame(options, tree_provider, position_provider, presenter, store)
