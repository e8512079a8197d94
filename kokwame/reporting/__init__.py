from kokwame.reporting.diagnostics import Diagnostic, DiagnosticProducer, DiagnosticStore, to_diagnostic
from kokwame.reporting.formatters import ConsolePresenter, format_json, format_text, info_lines

__all__ = [
    "ConsolePresenter",
    "Diagnostic",
    "DiagnosticProducer",
    "DiagnosticStore",
    "format_json",
    "format_text",
    "info_lines",
    "to_diagnostic",
]
