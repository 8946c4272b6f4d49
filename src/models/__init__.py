"""
Models package for mdrel

Contains data structures and type definitions for the rewriting pipeline.
"""

from .state import ProgramState, pipeline
from .directives import Directive, WholeFile, Section, LineRange, SectionScan
from .rewriter import TransformResult

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "WholeFile",
    "Section",
    "LineRange",
    "SectionScan",
    "TransformResult",
]
