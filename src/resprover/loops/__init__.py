"""
Given clause loops.
"""

from .base import Loop, Status, Verdict
from .given_clause import GivenClauseLoop, SearchStats

__all__ = [
    'Loop', 'Status', 'Verdict', 'GivenClauseLoop', 'SearchStats'
]
