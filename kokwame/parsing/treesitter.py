from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

try:
    from tree_sitter_languages import get_parser
except Exception:  # pragma: no cover - optional dependency handling
    get_parser = None

from kokwame.core.errors import SourceError

logger = logging.getLogger(__name__)


# Grammars whose function points the locator can name.
LANGUAGES = {
    "python": {".py"},
    "php": {".php"},
    "c": {".c", ".h"},
    "cpp": {".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx"},
    "java": {".java"},
    "c_sharp": {".cs"},
}

LANGUAGE_ALIASES = {
    "csharp": "c_sharp",
}


@dataclass(frozen=True)
class ParsedBuffer:
    path: str
    language: str
    source: bytes
    tree: object

    @property
    def root(self):
        return self.tree.root_node


def language_for_path(path: str) -> Optional[str]:
    ext = Path(path).suffix.lower()
    for name, extensions in LANGUAGES.items():
        if ext in extensions:
            return name
    return None


def parsers_available() -> bool:
    return get_parser is not None


def parse_source(source: bytes, language: str, path: str = "<buffer>") -> Optional[ParsedBuffer]:
    if get_parser is None:
        logger.info("tree_sitter_languages is not installed; no syntax tree for %s", path)
        return None
    language = LANGUAGE_ALIASES.get(language, language)
    parser = get_parser(language)
    tree = parser.parse(source)
    return ParsedBuffer(path=path, language=language, source=source, tree=tree)


def parse_file(path: str, language: Optional[str] = None) -> Optional[ParsedBuffer]:
    language = language or language_for_path(path)
    if language is None:
        logger.info("No parser for %s", path)
        return None
    try:
        source = Path(path).read_bytes()
    except OSError as exc:
        raise SourceError(path, exc.strerror or str(exc)) from exc
    return parse_source(source, language, path=path)


class FileTreeProvider:
    """Provides the syntax tree of a file on disk, parsed on every request."""

    def __init__(self, path: str, language: Optional[str] = None) -> None:
        self.path = path
        self.language = language

    def current_tree(self):
        parsed = parse_file(self.path, self.language)
        if parsed is None:
            return None
        return parsed.root
