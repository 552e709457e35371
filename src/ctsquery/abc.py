"""Abstract adapter contract for evaluating rendered search expressions."""

from abc import ABC, abstractmethod
from typing import Any, List

__all__ = ("SearchAdapter",)


class SearchAdapter(ABC):
    """Client able to evaluate a search expression against the engine.

    Implementations own the transport and result parsing; they receive the
    complete expression text and return the matched items.
    """

    @abstractmethod
    def execute(self, expression: str) -> List[Any]:
        """Evaluate `expression` verbatim and return the matched items in order."""
        raise NotImplementedError
