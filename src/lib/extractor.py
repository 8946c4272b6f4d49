"""
Content extraction for inclusion directives

Turns a parsed directive into the exact lines that go between the code
fences, reading the referenced file through a content provider.

Extraction modes:
    - WholeFile: the file verbatim, followed by one unconditional line end
    - Section: lines between "// section <name>" and the next marker
    - LineRange: zero-based, inclusive slice of the file's lines

Outside strict mode a missing section, an inverted range or a short file
silently produce fewer (or no) lines. In strict mode they raise.
"""

from typing import Iterable, Iterator, Optional

from ..config import appsettings
from ..models.directives import Directive, WholeFile, Section, LineRange, SectionScan
from .errors import (
    ImportFileError,
    SectionNotFoundError,
    InvalidLineChunkError,
    FileTooSmallError,
)
from .log import LOG
from .provider import ContentProvider, chomp, lines_guard


class Extractor:
    """
    Extracts directive content from referenced files

    One provider call, and one full read, per directive; nothing is cached.
    """

    def __init__(
        self,
        provider: ContentProvider,
        strict: Optional[bool] = None,
        section_marker: Optional[str] = None,
    ) -> None:
        """
        Initialize extractor

        Args:
            provider: Content provider used to open referenced files
            strict: Raise on silent degradations (defaults to appsettings.strict_mode)
            section_marker: Section marker prefix (defaults to appsettings.section_marker)
        """
        self.provider = provider
        self.strict = appsettings.strict_mode if strict is None else strict
        self.section_marker = section_marker or appsettings.section_marker

    def lines_extract(self, directive: Directive) -> Iterator[str]:
        """
        Produce the output lines for a directive

        Args:
            directive: Parsed directive

        Yields:
            Output lines without line terminators

        Raises:
            OpenReadError: The provider could not open the referenced file
            ImportFileError: Reading the referenced file failed
        """
        with self.provider.open(directive.filename) as handle:
            lines = lines_guard(handle, directive.filename, ImportFileError)
            if isinstance(directive, WholeFile):
                yield from self.wholeFile_extract(lines)
            elif isinstance(directive, Section):
                yield from self.section_extract(directive, lines)
            elif isinstance(directive, LineRange):
                yield from self.lineRange_extract(directive, lines)
            else:
                raise TypeError(f"Unknown directive: {directive!r}")

    def wholeFile_extract(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Emit the whole file followed by one line terminator

        Terminated lines are emitted without their newline. The final
        unterminated remainder is emitted last, or an empty line when the
        file ends with a newline (or is empty).
        """
        tail = ""
        for line in lines:
            if line.endswith("\n"):
                yield line[:-1]
            else:
                tail = line
        yield tail

    def markerName_get(self, line: str) -> Optional[str]:
        """
        Return the section name if a line is a section marker

        Leading spaces are ignored; the name is stripped of spaces and the
        trailing newline.

        Example:
            >>> Extractor(provider).markerName_get("    // section setup\\n")
            'setup'
            >>> Extractor(provider).markerName_get("let x = 1;\\n") is None
            True
        """
        trimmed = line.lstrip(" ")
        if not trimmed.startswith(self.section_marker):
            return None
        return trimmed[len(self.section_marker):].rstrip("\n").strip(" ")

    def section_extract(self, directive: Section, lines: Iterable[str]) -> Iterator[str]:
        """
        Emit the lines of a named section

        SEARCHING: discard lines until a marker naming the section.
        COLLECTING: emit lines until a marker of any name, then DONE.
        Marker lines themselves are never emitted.
        """
        state = SectionScan.SEARCHING

        for line in lines:
            name = self.markerName_get(line)

            if state is SectionScan.SEARCHING:
                if name == directive.section_name:
                    LOG(f"Found section '{name}' in {directive.filename}", level=3)
                    state = SectionScan.COLLECTING
            elif state is SectionScan.COLLECTING:
                if name is not None:
                    state = SectionScan.DONE
                    break
                yield chomp(line)

        if state is SectionScan.SEARCHING:
            if self.strict:
                raise SectionNotFoundError(directive.filename, directive.section_name)
            LOG(f"Warning: section '{directive.section_name}' not found in {directive.filename}", level=2)

    def lineRange_extract(self, directive: LineRange, lines: Iterable[str]) -> Iterator[str]:
        """
        Emit lines start..end (zero-based, inclusive)

        Reading stops at the end offset. A file shorter than end + 1 lines
        yields whatever part of the range exists.
        """
        start, end = directive.start, directive.end

        if start > end:
            if self.strict:
                raise InvalidLineChunkError(directive.filename, start, end)
            LOG(f"Warning: empty line range {start}..{end} for {directive.filename}", level=2)
            return

        line_count = 0
        for index, line in enumerate(lines):
            line_count = index + 1
            if index >= start:
                yield chomp(line)
            if index == end:
                break

        if line_count <= end:
            if self.strict:
                raise FileTooSmallError(directive.filename, line_count, end)
            LOG(f"Warning: {directive.filename} has only {line_count} lines, range ends at {end}", level=2)


def lines_extract(
    directive: Directive, provider: ContentProvider, strict: Optional[bool] = None
) -> Iterator[str]:
    """Extract a directive's lines with a one-off Extractor"""
    return Extractor(provider, strict=strict).lines_extract(directive)
