"""
Tests against real tree-sitter grammars.
"""

import pytest

pytest.importorskip("tree_sitter_languages")

from kokwame.analysis.report import analyze, unit_containing
from kokwame.analysis.severity import Severity
from kokwame.parsing.treesitter import FileTreeProvider, language_for_path, parse_file, parse_source
from kokwame.utils.location import Position

PYTHON_SOURCE = b'''
def simple():
    return 1


def branchy(a, b):
    if a and b:
        return 1
    elif a:
        return 2
    else:
        for x in b:
            if x:
                return x
    return 0


class Thing:
    def method(self):
        def helper():
            if self:
                return 1
        return helper
'''

C_SOURCE = b'''
int add(int a, int b)
{
    if (a > b) {
        return a;
    }
    return a + b;
}
'''

PHP_SOURCE = b'''<?php
function fubar(int $number) {
}

class WanToe {
    public function getName($name = null) {
        if ($name === null) {
            return 'name';
        }
        return $name;
    }
}
'''


class TestLanguageDetection:
    """Tests for picking a grammar from a file name."""

    def test_known_extensions(self):
        assert language_for_path("app.py") == "python"
        assert language_for_path("index.php") == "php"
        assert language_for_path("main.c") == "c"
        assert language_for_path("main.cpp") == "cpp"
        assert language_for_path("App.java") == "java"
        assert language_for_path("Program.cs") == "c_sharp"

    def test_unknown_extension(self):
        assert language_for_path("README.md") is None


class TestPython:
    """Tests with the Python grammar."""

    def test_report(self):
        report = analyze(parse_source(PYTHON_SOURCE, "python").root)
        assert [info.name for info in report] == ["simple", "branchy", "method", "helper"]
        scores = {info.name: info.score for info in report}
        assert scores["simple"] == 1
        # if, boolean_operator, elif, else, for, nested if
        assert scores["branchy"] == 7
        assert scores["helper"] == 2
        assert scores["method"] == 2
        assert all(info.severity is Severity.INFO for info in report)

    def test_unit_containing(self):
        report = analyze(parse_source(PYTHON_SOURCE, "python").root)
        assert unit_containing(report, Position(7, 0)).name == "branchy"
        assert unit_containing(report, Position(20, 0)).name == "method"
        assert unit_containing(report, Position(16, 0)) is None

    def test_file_provider(self, tmp_path):
        path = tmp_path / "mod.py"
        path.write_bytes(PYTHON_SOURCE)
        assert len(analyze(FileTreeProvider(str(path)).current_tree())) == 4

    def test_unknown_file_type(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("nothing", encoding="utf-8")
        assert parse_file(str(path)) is None
        assert FileTreeProvider(str(path)).current_tree() is None


class TestOtherGrammars:
    """Tests with grammars that wrap or rename the identifier."""

    def test_c_declarator(self):
        report = analyze(parse_source(C_SOURCE, "c").root)
        assert [info.name for info in report] == ["add"]
        # if_statement, binary_expression in the condition and in the return
        assert report[0].score == 3

    def test_php(self):
        report = analyze(parse_source(PHP_SOURCE, "php").root)
        assert [info.name for info in report] == ["fubar", "getName"]
        assert report[0].score == 1
        assert report[1].score == 2.5
