"""Generic name-keyed registry used for builders and list providers."""

from __future__ import annotations
import copy
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Keeps components by name, in registration order.
    """

    def __init__(self, name: str = "Registry") -> None:
        self.name = name
        self._registry: Dict[str, T] = {}

    def register(self, name: str, component: T) -> T:
        """
        Register a component under name, replacing any previous one.
        Returns the component.
        """
        self._registry[name] = component
        return component

    def unregister(self, name: str) -> Optional[T]:
        """Remove a component, returning it (None if it was not registered)."""
        return self._registry.pop(name, None)

    def get(self, name: str) -> Optional[T]:
        """
        Get a component by name. Returns None if not found.
        """
        return self._registry.get(name)

    def names(self) -> List[str]:
        return list(self._registry)

    def snapshot(self) -> Dict[str, T]:
        """
        Return a deep copy of all registered components.
        """
        return copy.deepcopy(self._registry)

    def clear(self) -> None:
        self._registry.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._registry))

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={len(self._registry)})"
