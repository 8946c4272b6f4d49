"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing CLI stages.
"""

from argparse import Namespace
from typing import Type, TypeVar, List, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from .rewriter import TransformResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: documents, verbosity, strict, listOnly
        - env_check: documentPaths, envOK
        - directives_list / documents_transform: results
        - results_report: exitCode

    Attributes:
        documents: Document paths exactly as given on the command line
        verbosity: Logging verbosity level (1-3)
        strict: Enable strict mode for this run
        listOnly: Print directive lines instead of transforming
        envOK: Environment validation passed
        documentPaths: Documents that exist and will be processed
        results: One TransformResult per processed document
        exitCode: Process exit status decided by results_report
    """

    # CLI arguments
    documents: List[str] = field(default_factory=list)
    verbosity: int = field(default=1)
    strict: bool = field(default=False)
    listOnly: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    documentPaths: List[str] = field(default_factory=list)
    results: List["TransformResult"] = field(default_factory=list)
    exitCode: int = field(default=0)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace.

        Only options that name a ProgramState field are carried over.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all matching CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            documents_transform,
            results_report
        )

    This is equivalent to:
        results_report(documents_transform(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
