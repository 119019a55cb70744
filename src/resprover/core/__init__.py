"""Core propositional data structures."""

from .logic import (
    Proposition, Literal, Clause, Problem, EMPTY_CLAUSE
)

__all__ = [
    'Proposition', 'Literal', 'Clause', 'Problem', 'EMPTY_CLAUSE'
]
