"""
Error hierarchy for mdrel

Every failure raised by the rewriting engine derives from MdError. The I/O
kinds wrap the OSError (or decoding error) that caused them; the remaining
kinds are only raised in strict mode, where silent degradations such as a
missing section become errors.
"""

from typing import Optional


class MdError(Exception):
    """Base class for all mdrel failures"""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class OpenReadError(MdError):
    """Raised when a document or referenced file cannot be opened"""
    pass


class OpenWriteError(MdError):
    """Raised when the destination file cannot be created"""
    pass


class SourceError(MdError):
    """Raised when reading lines of the document being rewritten fails"""
    pass


class ImportFileError(MdError):
    """Raised when reading lines of a referenced file fails"""
    pass


class OutputError(MdError):
    """Raised when writing to the destination fails"""
    pass


class NonMatchingCodeError(MdError):
    """Strict mode: a ^code line matched none of the directive shapes"""

    def __init__(self, line: str) -> None:
        super().__init__(f"Malformed directive: {line!r}")
        self.line = line


class SectionNotFoundError(MdError):
    """Strict mode: the named section never appeared in the referenced file"""

    def __init__(self, filename: str, section_name: str) -> None:
        super().__init__(f"Section '{section_name}' not found in {filename}")
        self.filename = filename
        self.section_name = section_name


class InvalidLineChunkError(MdError):
    """Strict mode: a line range whose start lies after its end"""

    def __init__(self, filename: str, start: int, end: int) -> None:
        super().__init__(f"Invalid line range {start}..{end} for {filename}")
        self.filename = filename
        self.start = start
        self.end = end


class FileTooSmallError(MdError):
    """Strict mode: a line range reaching past the end of the referenced file"""

    def __init__(self, filename: str, line_count: int, end: int) -> None:
        super().__init__(
            f"{filename} has {line_count} lines, range needs at least {end + 1}"
        )
        self.filename = filename
        self.line_count = line_count
        self.end = end
