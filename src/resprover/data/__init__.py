"""Problem collections."""

from .problemset import ProblemSet

__all__ = ['ProblemSet']
