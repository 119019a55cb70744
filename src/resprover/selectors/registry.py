"""Registry for clause selectors."""

from typing import Dict, Type, Any, List

from .base import Selector
from .first import FirstClauseSelector
from .random import RandomSelector
from .shortest import ShortestSelector
from .learned import LearnedSelector


class SelectorRegistry:
    """Registry for managing clause selectors."""

    def __init__(self):
        self._selectors: Dict[str, Type[Selector]] = {}
        self._register_default_selectors()

    def _register_default_selectors(self):
        """Register default selectors."""
        self.register('first', FirstClauseSelector)
        self.register('random', RandomSelector)
        self.register('shortest', ShortestSelector)
        self.register('learned', LearnedSelector)

    def register(self, name: str, selector_class: Type[Selector]):
        """Register a new selector type."""
        self._selectors[name.lower()] = selector_class

    def create_selector(self, name: str, **kwargs: Any) -> Selector:
        """Create a selector instance."""
        name = name.lower()

        if name not in self._selectors:
            raise ValueError(f"Unknown selector: {name}")

        return self._selectors[name](**kwargs)

    def list_selectors(self) -> List[str]:
        """List available selector names."""
        return list(self._selectors.keys())


_registry = SelectorRegistry()


def get_selector(name: str, **kwargs: Any) -> Selector:
    """Get a clause selector instance."""
    return _registry.create_selector(name, **kwargs)


def list_selectors() -> List[str]:
    return _registry.list_selectors()
