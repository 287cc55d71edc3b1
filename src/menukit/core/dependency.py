"""
DependencyGraph - visibility of an element as a function of others.

Each element owns an ordered list of (dependency, match value) edges. The
element is visible when every edge holds:
- with a match value: the dependency contains it
- without one (None, which Element.depend also uses for False): the
  dependency's current value is truthy

Visibility is always recomputed from the full edge list. It is only
recomputed when the owning element asks (depend / multi_depend); a
dependency changing value elsewhere does not propagate by itself.
Callbacks that call depend() across elements must not form a cycle.
"""

from typing import Any, List, Optional, Tuple

from .matcher import contains

Edge = Tuple[Any, Optional[Any]]


class DependencyGraph:
    """Ordered, duplicate-free edge list of one element."""

    def __init__(self):
        self._edges: List[Edge] = []

    def has(self, dependency: Any, value: Optional[Any] = None) -> bool:
        """Check whether the exact (dependency, value) edge exists."""
        return any(d is dependency and v == value for d, v in self._edges)

    def add(self, dependency: Any, value: Optional[Any] = None) -> bool:
        """
        Add an edge unless it is already present.

        Returns:
            True if the edge was added
        """
        if self.has(dependency, value):
            return False
        self._edges.append((dependency, value))
        return True

    def remove(self, dependency: Any, value: Optional[Any] = None) -> bool:
        """
        Remove an edge.

        Returns:
            True if the edge existed
        """
        for index, (d, v) in enumerate(self._edges):
            if d is dependency and v == value:
                del self._edges[index]
                return True
        return False

    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def evaluate(self) -> bool:
        """Compute visibility as the AND over all edges."""
        return all(self._holds(d, v) for d, v in self._edges)

    @staticmethod
    def _holds(dependency: Any, value: Optional[Any]) -> bool:
        if value is None:
            return bool(dependency.get())
        return contains(dependency, value)

    def __len__(self) -> int:
        return len(self._edges)
