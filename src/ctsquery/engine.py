"""
Search engine facade.

This module provides `SearchEngine`, which renders `Query` objects with a
serializer and hands the resulting expression to a pluggable
`SearchAdapter` for evaluation.
"""

from typing import Any, List, Optional

from .abc import SearchAdapter
from .logger import Logger
from .query.query import Query
from .serializers.base import BaseQuerySerializer
from .serializers.cts import cts_serializer


class SearchEngine:
    """High-level entry point for running queries through an adapter.

    Attributes:
        adapter: Adapter evaluating rendered expressions
        serializer: Serializer turning queries into expressions
    """

    def __init__(self, adapter: SearchAdapter, serializer: BaseQuerySerializer = cts_serializer) -> None:
        self._adapter = adapter
        self._serializer = serializer
        self.logger = Logger(self.__class__.__name__)
        self.logger.message(
            "SearchEngine initialized: adapter=%s serializer=%s",
            adapter.__class__.__name__,
            serializer.__class__.__name__,
        )

    @property
    def adapter(self) -> SearchAdapter:
        return self._adapter

    @property
    def serializer(self) -> BaseQuerySerializer:
        return self._serializer

    def to_expression(self, query: Query) -> str:
        """Render a query without evaluating it."""
        return self._serializer.serialize(query)

    def search(self, query: Query) -> List[Any]:
        """Render and evaluate a query.

        Args:
            query: Query to run; it is not modified

        Returns:
            Items returned by the adapter, in engine order

        Examples:
            >>> engine.search(Query(collection="people", criteria=leaf("name", "Me")))
            >>> engine.search(Query(sort_criteria=["-age"], limit=10))
        """
        expression = self.to_expression(query)
        self.logger.message("Search expr=%s", expression)
        return self._adapter.execute(expression)

    def first(self, query: Query) -> Optional[Any]:
        """Return the first match of a query, or None when nothing matches.

        The query keeps its skip; the limit is forced to 1 on a copy.
        """
        single = query.copy()
        single.limit = 1
        results = self.search(single)
        return results[0] if results else None
