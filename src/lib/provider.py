"""
Content providers

A content provider opens a referenced file by name for line-oriented
reading. The rewriting engine only ever talks to this capability, which
keeps it independent of the filesystem and easy to drive from memory.

Providers:
    - FileContentProvider: resolves names relative to a document directory
    - MemoryContentProvider: serves a {name: text} mapping
"""

import io
from pathlib import Path
from typing import ContextManager, Dict, Iterable, Iterator, Optional, Protocol, Type, Union

from ..config import appsettings
from .errors import MdError, OpenReadError
from .log import LOG


class ContentProvider(Protocol):
    """
    Capability to open a named resource for line-oriented reading

    open() returns a context manager yielding an iterable of text lines,
    each keeping its trailing newline the way a Python text file does.
    It raises OpenReadError if the resource cannot be opened.
    """

    def open(self, filename: str) -> ContextManager[Iterable[str]]:
        ...


class FileContentProvider:
    """
    Provider reading referenced files from disk

    Names are resolved relative to base_dir, normally the directory of the
    document being transformed.
    """

    def __init__(self, base_dir: Union[str, Path], encoding: Optional[str] = None) -> None:
        self.base_dir = Path(base_dir)
        self.encoding = encoding or appsettings.encoding

    def path_resolve(self, filename: str) -> Path:
        """Resolve a referenced filename against the document directory"""
        return self.base_dir / filename

    def open(self, filename: str) -> ContextManager[Iterable[str]]:
        path = self.path_resolve(filename)
        LOG(f"Opening referenced file {path}", level=3)
        try:
            return path.open("r", encoding=self.encoding)
        except OSError as e:
            raise OpenReadError(f"Cannot open {path}: {e}", e) from e


class MemoryContentProvider:
    """
    Provider serving in-memory text

    Example:
        >>> provider = MemoryContentProvider({"a.rs": "fn main() {}\\n"})
        >>> with provider.open("a.rs") as lines:
        ...     list(lines)
        ['fn main() {}\\n']
    """

    def __init__(self, files: Dict[str, str]) -> None:
        self.files = dict(files)
        self.opened: Dict[str, int] = {}

    def open(self, filename: str) -> ContextManager[Iterable[str]]:
        if filename not in self.files:
            raise OpenReadError(f"No such file: {filename}")
        self.opened[filename] = self.opened.get(filename, 0) + 1
        return io.StringIO(self.files[filename], newline="\n")


def lines_guard(lines: Iterable[str], name: str, error: Type[MdError]) -> Iterator[str]:
    """
    Iterate lines, converting read failures into an mdrel error

    Args:
        lines: Open line source (file handle, StringIO, list)
        name: Name used in the error message
        error: MdError subclass raised on OSError or decoding failure

    Yields:
        The lines of the source, unchanged
    """
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise error(f"Failed reading {name}: {e}", e) from e
        yield line


def chomp(line: str) -> str:
    """Strip one trailing newline"""
    return line[:-1] if line.endswith("\n") else line


def outputPath_derive(source: str) -> str:
    """
    Derive a document's destination path

    Strips an exact '.dev.md' suffix and appends '.md'. Any other path just
    gets '.md' appended, so 'notes.md' becomes 'notes.md.md'.

    Args:
        source: Path of the source document

    Returns:
        Destination path
    """
    return appsettings.outputPath_derive(source)
