"""
Directive models

Defines the three shapes an inclusion directive can take and the states of
the section scanner that consumes Section directives.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WholeFile:
    """
    Include an entire referenced file

    Source form: ^code(filename)

    Attributes:
        filename: Referenced file, relative to the document's directory
    """
    filename: str


@dataclass(frozen=True)
class Section:
    """
    Include a named section delimited by marker comments

    Source form: ^code(filename, sectionName)

    Attributes:
        filename: Referenced file, relative to the document's directory
        section_name: Marker name to collect (letters only)

    Example:
        For ^code(lib.rs, setup) the lines between "// section setup" and
        the next "// section ..." marker in lib.rs are included.
    """
    filename: str
    section_name: str


@dataclass(frozen=True)
class LineRange:
    """
    Include an explicit, inclusive range of lines

    Source form: ^code(filename, start, end)

    Attributes:
        filename: Referenced file, relative to the document's directory
        start: Zero-based offset of the first line to include
        end: Zero-based offset of the last line to include (inclusive)

    Note:
        start <= end is expected but not checked by the parser. Outside
        strict mode an inverted range simply extracts nothing.
    """
    filename: str
    start: int
    end: int


Directive = Union[WholeFile, Section, LineRange]


class SectionScan(Enum):
    """
    States of the section extractor

    SEARCHING -> COLLECTING when the target marker is seen,
    COLLECTING -> DONE on the next marker of any name.
    """
    SEARCHING = "searching"
    COLLECTING = "collecting"
    DONE = "done"
