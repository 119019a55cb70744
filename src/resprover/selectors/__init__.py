"""
Clause selection strategies for the given clause loop.

    - FirstClauseSelector: first clause in canonical order, no budget
    - RandomSelector: uniform choice with a step budget
    - ShortestSelector: fewest literals, random tie-break, step budget
    - LearnedSelector: sampling from learned value estimates, step budget
"""

from .base import Selector, BudgetedSelector
from .first import FirstClauseSelector
from .random import RandomSelector
from .shortest import ShortestSelector
from .learned import LearnedSelector, LearningState
from .registry import SelectorRegistry, get_selector, list_selectors

__all__ = [
    'Selector', 'BudgetedSelector',
    'FirstClauseSelector', 'RandomSelector', 'ShortestSelector',
    'LearnedSelector', 'LearningState',
    'SelectorRegistry', 'get_selector', 'list_selectors'
]
