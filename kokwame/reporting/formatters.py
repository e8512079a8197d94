from __future__ import annotations

import json
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from kokwame.analysis.report import UnitInfo
from kokwame.core.config import Border

BORDER_BOXES = {
    Border.SINGLE: box.SQUARE,
    Border.DOUBLE: box.DOUBLE,
    Border.ROUNDED: box.ROUNDED,
    Border.SOLID: box.HEAVY,
    Border.SHADOW: box.HEAVY,
}

SEVERITY_STYLES = {
    "info": "dim",
    "warning": "yellow",
    "error": "bold red",
}


def align_center(text: str, width: int) -> str:
    if len(text) >= width:
        return text
    return " " * ((width - len(text)) // 2) + text


def info_lines(info: UnitInfo) -> List[str]:
    """Lines of the info popup: centered name, a blank line, the metrics."""
    metrics = [f" 1. {info.message} "]
    width = max([len(info.name)] + [len(line) for line in metrics])
    return [align_center(info.name, width), ""] + metrics


def format_text(path: str, report: Iterable[UnitInfo]) -> str:
    lines = []
    for info in report:
        start = info.name_range.start
        lines.append(
            f"{path}:{start.row + 1}:{start.column + 1}: "
            f"{info.severity.value.upper()} {info.message} ({info.name})"
        )
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def format_json(path: str, report: Iterable[UnitInfo]) -> str:
    data = {
        "path": path,
        "units": [info.to_dict() for info in report],
    }
    return json.dumps(data, indent=2)


class ConsolePresenter:
    """Renders popups and notices on a rich console."""

    def __init__(self, border: Border = Border.ROUNDED, console: Optional[Console] = None) -> None:
        self.border = border
        self.console = console or Console()

    def show_info(self, info: UnitInfo) -> None:
        body = Text("\n".join(info_lines(info)))
        if self.border is Border.NONE:
            self.console.print(body)
            return
        self.console.print(
            Panel(body, box=BORDER_BOXES[self.border], expand=False, border_style=SEVERITY_STYLES[info.severity.value])
        )

    def notify(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)
