"""
Search state representation.
"""

from .state import ProofState

__all__ = ['ProofState']
