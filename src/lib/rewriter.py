"""
Stream rewriter for mdrel documents

Makes a single top-to-bottom pass over a markdown document, replacing each
^code(...) directive line with a fenced code block holding the extracted
content and passing every other line through.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from ..config import appsettings
from ..models.rewriter import TransformResult
from .errors import (
    NonMatchingCodeError,
    OpenReadError,
    OpenWriteError,
    OutputError,
    SourceError,
)
from .extractor import Extractor
from .language import language_guess
from .log import LOG
from .parser import DirectiveParser
from .provider import ContentProvider, FileContentProvider, chomp, lines_guard, outputPath_derive


class Rewriter:
    """
    Rewrites a markdown document, resolving inclusion directives

    Responsibilities:
    - Detect directive lines
    - Wrap extracted content in language-tagged code fences
    - Drop ^code lines that match no directive shape
    - Pass all other lines through with the trailing newline normalized
    """

    def __init__(
        self,
        provider: ContentProvider,
        strict: Optional[bool] = None,
        document_name: str = "<document>",
    ) -> None:
        """
        Initialize rewriter

        Args:
            provider: Content provider for referenced files
            strict: Raise on malformed directives and silent extraction
                    gaps (defaults to appsettings.strict_mode)
            document_name: Name used in error messages for the document
        """
        self.provider = provider
        self.strict = appsettings.strict_mode if strict is None else strict
        self.document_name = document_name
        self.parser = DirectiveParser()
        self.extractor = Extractor(provider, strict=self.strict)
        self.fence = appsettings.fence

        self.directive_count = 0
        self.dropped_count = 0

    def document_rewrite(self, input_lines: Iterable[str]) -> Iterator[str]:
        """
        Rewrite a document line by line

        Args:
            input_lines: Lines of the document (trailing newlines allowed)

        Yields:
            Output lines without line terminators

        Raises:
            SourceError: Reading the document failed
            OpenReadError, ImportFileError: A referenced file failed
            NonMatchingCodeError: Malformed directive (strict mode only)
        """
        for line in lines_guard(input_lines, self.document_name, SourceError):
            if not self.parser.directive_isCandidate(line):
                yield chomp(line)
                continue

            directive = self.parser.directive_detect(line)
            if directive is None:
                if self.strict:
                    raise NonMatchingCodeError(chomp(line))
                LOG(f"Dropping malformed directive: {chomp(line)}", level=2)
                self.dropped_count += 1
                continue

            LOG(f"Resolving {directive}", level=2)
            self.directive_count += 1
            yield f"{self.fence}{language_guess(directive)}"
            yield from self.extractor.lines_extract(directive)
            yield self.fence

    def stream_process(self, source: Iterable[str], sink: TextIO) -> None:
        """
        Rewrite a document from a line source into a text sink

        Each output line is written followed by a newline.

        Raises:
            OutputError: Writing to the sink failed
            (plus everything document_rewrite raises)
        """
        for line in self.document_rewrite(source):
            try:
                sink.write(line)
                sink.write("\n")
            except OSError as e:
                raise OutputError(f"Failed writing output: {e}", e) from e


def document_rewrite(
    input_lines: Iterable[str], provider: ContentProvider, strict: Optional[bool] = None
) -> Iterator[str]:
    """Rewrite a document with a one-off Rewriter (see Rewriter.document_rewrite)"""
    return Rewriter(provider, strict=strict).document_rewrite(input_lines)


def file_transform(source: str, strict: Optional[bool] = None) -> TransformResult:
    """
    Transform one document on disk

    Reads the source document, resolves its directives against files in the
    document's own directory and writes the result to the derived output
    path. Any failure aborts the transform; output already written stays.

    Args:
        source: Path of the source document
        strict: Override appsettings.strict_mode for this document

    Returns:
        TransformResult for a completed transform

    Raises:
        OpenReadError: The document or a referenced file could not be opened
        OpenWriteError: The destination could not be created
        SourceError, ImportFileError, OutputError: Read/write failures
    """
    output_file = outputPath_derive(source)
    encoding = appsettings.encoding
    LOG(f"Transforming {source} -> {output_file}", level=2)

    try:
        read_file = open(source, "r", encoding=encoding)
    except OSError as e:
        raise OpenReadError(f"Cannot open {source}: {e}", e) from e

    with read_file:
        try:
            write_file = open(output_file, "w", encoding=encoding)
        except OSError as e:
            raise OpenWriteError(f"Cannot create {output_file}: {e}", e) from e

        with write_file:
            provider = FileContentProvider(Path(source).parent, encoding=encoding)
            rewriter = Rewriter(provider, strict=strict, document_name=source)
            rewriter.stream_process(read_file, write_file)

    LOG(f"Wrote {output_file} ({rewriter.directive_count} directives)", level=2)

    return TransformResult(
        source=source,
        output_file=output_file,
        status=True,
        directive_count=rewriter.directive_count,
        dropped_count=rewriter.dropped_count,
    )
