"""
resprover: propositional resolution with learned clause selection.

resprover implements the given clause algorithm for propositional logic.
It includes:

- Propositional literals, clauses and problems
- Binary resolution
- A given clause loop with pluggable clause selectors
- First-clause, random, shortest-first and learned-value selectors
- A small value network trained online by the learned selector
- DIMACS CNF support

Basic usage:
    >>> from resprover import *
    >>> problem = read_string("p cnf 1 2\\n1 0\\n-1 0\\n")
    >>> prove(problem, selector="first")
    <Verdict.PROVED: 'proved'>
"""

__version__ = "0.1.0"

# Core logic structures
from resprover.core import (
    Proposition, Literal, Clause, Problem, EMPTY_CLAUSE
)

# Search state
from resprover.proofs import ProofState

# Inference
from resprover.rules import ResolutionMode, DEFAULT_RESOLUTION_MODE, resolve

# Given clause loop
from resprover.loops import Loop, GivenClauseLoop, Status, Verdict

# Clause selectors
from resprover.selectors import (
    Selector, FirstClauseSelector, RandomSelector, ShortestSelector,
    LearnedSelector, get_selector
)

# File formats
from resprover.fileformats import get_format_handler, read_file, read_string


def prove(clauses,
          selector="first",
          mode: ResolutionMode = DEFAULT_RESOLUTION_MODE,
          **kwargs) -> Verdict:
    """
    Attempt to refute a clause collection.

    Args:
        clauses: A Problem or an iterable of clauses
        selector: Selector instance or registered selector name
        mode: Resolvent construction mode
        **kwargs: Arguments for the selector when given by name

    Returns:
        Verdict.PROVED if the empty clause was derived, else Verdict.REJECTED
    """
    if isinstance(selector, str):
        selector = get_selector(selector, **kwargs)
    return GivenClauseLoop(clauses, selector, mode).prove()


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Proposition", "Literal", "Clause", "Problem", "EMPTY_CLAUSE",

    # State
    "ProofState",

    # Rules
    "ResolutionMode", "DEFAULT_RESOLUTION_MODE", "resolve",

    # Loops
    "Loop", "GivenClauseLoop", "Status", "Verdict",

    # Selectors
    "Selector", "FirstClauseSelector", "RandomSelector", "ShortestSelector",
    "LearnedSelector", "get_selector",

    # File formats
    "get_format_handler", "read_file", "read_string",

    # High-level API
    "prove"
]
