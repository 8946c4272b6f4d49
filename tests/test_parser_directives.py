"""
Directive parser tests

Tests classification of ^code(...) lines into WholeFile, Section and
LineRange directives, whitespace tolerance and malformed lines.
"""

import pytest

from mdrel.lib.parser import DirectiveParser, directive_detect, directive_isCandidate
from mdrel.models.directives import WholeFile, Section, LineRange


class TestDirectiveShapes:
    """Test the three directive shapes"""

    def test_whole_file(self):
        """Single filename argument"""
        assert directive_detect("^code(abc.rs)") == WholeFile("abc.rs")

    def test_section(self):
        """Filename plus letters-only section name"""
        assert directive_detect("^code(abc.rs,sec)") == Section("abc.rs", "sec")

    def test_line_range(self):
        """Filename plus two line numbers"""
        assert directive_detect("^code(abc.rs,0,10)") == LineRange("abc.rs", 0, 10)

    def test_path_filename(self):
        """Filenames may contain directories"""
        assert directive_detect("^code(src/lib/main.rs)") == WholeFile("src/lib/main.rs")

    def test_trailing_newline(self):
        """A line read from a file still carries its newline"""
        assert directive_detect("^code(a.rs, x)\n") == Section("a.rs", "x")


class TestWhitespace:
    """Test whitespace tolerance around fields"""

    def test_whole_file_padded(self):
        """Spaces inside the parentheses are ignored"""
        assert directive_detect("^code(  abc.rs    )") == WholeFile("abc.rs")

    def test_section_padded(self):
        """Spaces around the comma are ignored"""
        assert directive_detect("^code(    abc.rs  ,  sec   )") == Section("abc.rs", "sec")

    def test_range_padded(self):
        """Spaces around both commas are ignored"""
        assert directive_detect("^code( a.rs , 3 , 7 )") == LineRange("a.rs", 3, 7)

    def test_tabs(self):
        """Tabs count as whitespace too"""
        assert directive_detect("^code(\ta.rs,\tsec\t)") == Section("a.rs", "sec")

    def test_text_after_directive_ignored(self):
        """Text after the closing parenthesis is ignored"""
        assert directive_detect("^code(a.rs) trailing words") == WholeFile("a.rs")

    def test_tab_inside_filename_rejected(self):
        """Whitespace ends the filename, tabs included"""
        assert directive_detect("^code(a\tb.rs)") is None


class TestSearchWholeLine:
    """Test lines holding more than one directive"""

    def test_later_directive_after_malformed_one(self):
        """A well-formed directive later in the line is used"""
        assert directive_detect("^code(a b.rs) ^code(c.rs)") == WholeFile("c.rs")

    def test_shapes_keep_priority_across_line(self):
        """The whole-file shape is tried over the whole line first"""
        assert directive_detect("^code(a.rs, x) ^code(b.rs)") == WholeFile("b.rs")

    def test_later_range_after_malformed_one(self):
        """Section and range shapes are searched too"""
        assert directive_detect("^code(a b) ^code(c.rs, 2, 4)") == LineRange("c.rs", 2, 4)


class TestMalformed:
    """Test lines that carry the prefix but match no shape"""

    @pytest.mark.parametrize("line", [
        "^code(bad syntax here)",
        "^code()",
        "^code(a.rs, x1)",
        "^code(a.rs, 1)",
        "^code(a.rs, 1, b)",
        "^code(a.rs, sec, 1)",
        "^code(a.rs, 1, 2, 3)",
        "^code a.rs",
        "^code(a.rs",
    ])
    def test_no_directive(self, line):
        """Malformed directive lines classify as None"""
        assert directive_detect(line) is None

    def test_section_name_letters_only(self):
        """Underscores are not allowed in section names"""
        assert directive_detect("^code(a.rs, my_section)") is None


class TestCandidates:
    """Test the literal prefix check"""

    def test_prefix_at_line_start(self):
        """Prefix must start the line"""
        assert directive_isCandidate("^code(a.rs)")
        assert not directive_isCandidate(" ^code(a.rs)")
        assert not directive_isCandidate("see ^code(a.rs)")

    def test_prefix_only(self):
        """Any line starting with the prefix is a candidate"""
        assert directive_isCandidate("^codex")


class TestCustomPrefix:
    """Test parsers built for another directive prefix"""

    def test_custom_prefix(self):
        """Patterns follow the configured prefix"""
        parser = DirectiveParser("@include")
        assert parser.directive_detect("@include(a.py, 1, 2)") == LineRange("a.py", 1, 2)
        assert parser.directive_detect("^code(a.py)") is None
        assert parser.directive_isCandidate("@include(a.py)")

    def test_prefix_is_literal(self):
        """Regex metacharacters in the prefix are escaped"""
        parser = DirectiveParser("^code")
        assert parser.directive_detect("Xcode(a.rs)") is None
