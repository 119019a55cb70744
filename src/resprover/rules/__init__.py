"""
Inference rules for propositional resolution.
"""

from .resolution import (
    ResolutionMode, DEFAULT_RESOLUTION_MODE, resolve
)

__all__ = [
    'ResolutionMode', 'DEFAULT_RESOLUTION_MODE', 'resolve'
]
