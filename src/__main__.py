#!/usr/bin/env python3
"""
mdrel - Literate-programming preprocessor for markdown

Rewrites ^code(...) inclusion directives in markdown documents into fenced
code blocks holding content extracted from the referenced source files.

Philosophy:
    - Documentation stays in sync with code: snippets are pulled, never pasted
    - One pass per document, one read per directive, nothing cached
    - Each document is transformed independently of the others

Directives:
    ^code(src/lib.rs)            whole file
    ^code(src/lib.rs, setup)     lines between "// section setup" and the next marker
    ^code(src/lib.rs, 10, 20)    zero-based, inclusive line range

Usage:
    mdrel guide.dev.md [more.dev.md ...]

    guide.dev.md is written to guide.md; any other document name gets
    ".md" appended. Referenced files are resolved relative to the
    document's directory.

Examples:
    # Transform a set of documents
    mdrel docs/*.dev.md

    # Fail loudly on malformed directives, missing sections and short files
    mdrel --strict guide.dev.md -v

    # Show the directives a document uses without writing anything
    mdrel --list guide.dev.md
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from pygments import highlight
from pygments.formatters import TerminalFormatter

from .config import appsettings
from .lib import __version__, file_transform, LOG, state_connectToLogger
from .lib.errors import MdError
from .lib.lexer import get_lexer
from .lib.parser import DirectiveParser
from .lib.provider import outputPath_derive
from .models import ProgramState, TransformResult, pipeline


DISPLAY_TITLE = r"""
               _          _
  _ __ ___   __| |_ __ ___| |
 | '_ ` _ \ / _` | '__/ _ \ |
 | | | | | | (_| | | |  __/ |
 |_| |_| |_|\__,_|_|  \___|_|

  Literate-programming preprocessor
"""

# Define CLI arguments
parser = ArgumentParser(
    prog="mdrel",
    description="mdrel - resolve ^code(...) directives in markdown into fenced code blocks",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "documents", nargs="+", type=str, help="Markdown documents to transform"
)

parser.add_argument(
    "--strict",
    action="store_true",
    default=False,
    help="Treat malformed directives, missing sections and short files as errors",
)

parser.add_argument(
    "--list",
    dest="listOnly",
    action="store_true",
    default=False,
    help="List each document's directive lines instead of transforming",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def strict_resolve(state: ProgramState) -> bool:
    """The --strict flag wins; otherwise MDREL_STRICT_MODE decides"""
    return state.strict or appsettings.strict_mode


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and collect the documents to process.

    Missing documents are not filtered out: they fail individually in the
    transform stage like any other unreadable document.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - documentPaths: Documents to process, in command-line order
            - envOK: True if environment is valid
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    state.documentPaths = list(state.documents)
    for document in state.documentPaths:
        if not Path(document).is_file():
            LOG(f"Warning: document not found: {document}", level=2)

    LOG(f"Strict mode: {strict_resolve(state)}", level=2)
    state.envOK = True
    return state


def documents_transform(inputstate: ProgramState) -> ProgramState:
    """
    Transform every document independently.

    A failure in one document is recorded in its TransformResult and
    never stops the remaining documents.

    Args:
        inputstate: Program state with documentPaths set

    Returns:
        ProgramState with added field:
            - results: One TransformResult per document
    """
    state = inputstate.copy()
    strict = True if state.strict else None
    results: List[TransformResult] = []

    for document in state.documentPaths:
        try:
            result = file_transform(document, strict=strict)
            LOG(f"{document} -> {result.output_file}", level=1)
        except MdError as e:
            LOG(f"Failed to transform {document}: {e}", level=2)
            result = TransformResult(
                source=document,
                output_file=outputPath_derive(document),
                status=False,
                error=e,
            )
        results.append(result)

    state.results = results
    return state


def directives_list(inputstate: ProgramState) -> ProgramState:
    """
    Print the directive lines of every document, highlighted.

    Nothing is written to disk. Unreadable documents are recorded as
    failures in the same way documents_transform does.

    Args:
        inputstate: Program state with documentPaths set

    Returns:
        ProgramState with added field:
            - results: One TransformResult per document (counts only)
    """
    state = inputstate.copy()
    directive_parser = DirectiveParser()
    lexer = get_lexer()
    formatter = TerminalFormatter()
    results: List[TransformResult] = []

    for document in state.documentPaths:
        result = TransformResult(source=document, output_file=outputPath_derive(document))
        try:
            text = Path(document).read_text(encoding=appsettings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            LOG(f"Failed to read {document}: {e}", level=2)
            result.error = MdError(f"Cannot read {document}: {e}", e)
            results.append(result)
            continue

        for number, line in enumerate(text.splitlines(), start=1):
            if not directive_parser.directive_isCandidate(line):
                continue
            if directive_parser.directive_detect(line) is None:
                result.dropped_count += 1
            else:
                result.directive_count += 1
            rendered = highlight(line, lexer, formatter).rstrip("\n")
            print(f"{document}:{number}: {rendered}")

        result.status = True
        results.append(result)

    state.results = results
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the run and decide the exit status.

    Failures are only shown at verbosity 2 and above. The exit status is 1
    only in strict mode when at least one document failed.

    Args:
        inputstate: Program state with results populated

    Returns:
        ProgramState with added field:
            - exitCode: Process exit status
    """
    state: ProgramState = inputstate.copy()

    failed = [result for result in state.results if not result.status]
    done = len(state.results) - len(failed)

    LOG(f"Processed {done}/{len(state.results)} documents", level=2)
    for result in failed:
        LOG(f"  {result.source}: {result.error}", level=2)

    state.exitCode = 1 if (failed and strict_resolve(state)) else 0
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - transform markdown documents.

    Orchestrates the pipeline:
        1. env_check: Collect documents
        2. documents_transform (or directives_list with --list)
        3. results_report: Summarize and pick the exit status

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    stage = directives_list if state.listOnly else documents_transform
    final_state = pipeline(state, env_check, stage, results_report)
    return final_state.exitCode


if __name__ == "__main__":
    sys.exit(main())
