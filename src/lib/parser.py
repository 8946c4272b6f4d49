"""
Parser for ^code(...) inclusion directives

Classifies a single markdown line as one of the three directive shapes or
as "not a directive".

Grammar (whitespace around each field is ignored):
    ^code(filename)
    ^code(filename, sectionName)
    ^code(filename, startLine, endLine)

The filename is any run of characters other than comma and whitespace, the
section name is letters only and the line bounds are digits only. The three
patterns are tried in that order and the first match wins. Since the
whole-file pattern cannot contain a comma the shapes never overlap.

Example:
    >>> directive_detect("^code(lib.rs, setup)")
    Section(filename='lib.rs', section_name='setup')
    >>> directive_detect("^code(lib.rs, 3, 9)")
    LineRange(filename='lib.rs', start=3, end=9)
    >>> directive_detect("^code(bad syntax here)") is None
    True
"""

import re
from typing import Optional

from ..config import appsettings
from ..models.directives import Directive, WholeFile, Section, LineRange


class DirectiveParser:
    """
    Line classifier for inclusion directives

    Holds the three compiled directive patterns for one directive prefix.
    Each pattern is searched anywhere in the line, so on a line such as
    "^code(a b.rs) ^code(c.rs)" a later well-formed directive still wins.
    Only lines passing directive_isCandidate are meant to reach detection.
    """

    def __init__(self, prefix: Optional[str] = None) -> None:
        """
        Compile the directive patterns

        Args:
            prefix: Literal directive prefix (defaults to appsettings.directive_prefix)
        """
        self.prefix = prefix if prefix is not None else appsettings.directive_prefix
        head = re.escape(self.prefix) + r"\(\s*([^,\s]+)\s*"
        self.wholeFile_pattern = re.compile(head + r"\)")
        self.section_pattern = re.compile(head + r",\s*([a-zA-Z]+)\s*\)")
        self.lineRange_pattern = re.compile(head + r",\s*([0-9]+)\s*,\s*([0-9]+)\s*\)")

    def directive_isCandidate(self, line: str) -> bool:
        """Check if a line carries the literal directive prefix"""
        return line.startswith(self.prefix)

    def directive_detect(self, line: str) -> Optional[Directive]:
        """
        Classify a line as a directive

        Args:
            line: One line of the source document (trailing newline allowed)

        Returns:
            WholeFile, Section or LineRange, or None if no shape matches
        """
        match = self.wholeFile_pattern.search(line)
        if match:
            return WholeFile(match.group(1))

        match = self.section_pattern.search(line)
        if match:
            return Section(match.group(1), match.group(2))

        match = self.lineRange_pattern.search(line)
        if match:
            try:
                start, end = int(match.group(2)), int(match.group(3))
            except ValueError:
                return None
            return LineRange(match.group(1), start, end)

        return None


_default_parser: Optional[DirectiveParser] = None


def parser_get() -> DirectiveParser:
    """Return the shared parser for the configured directive prefix"""
    global _default_parser
    if _default_parser is None or _default_parser.prefix != appsettings.directive_prefix:
        _default_parser = DirectiveParser()
    return _default_parser


def directive_detect(line: str) -> Optional[Directive]:
    """Classify a line with the shared parser (see DirectiveParser.directive_detect)"""
    return parser_get().directive_detect(line)


def directive_isCandidate(line: str) -> bool:
    """Check a line for the directive prefix with the shared parser"""
    return parser_get().directive_isCandidate(line)
