"""Base serializer interface.

Defines the abstract contract all engine-specific query serializers must follow.
"""

from abc import ABC, abstractmethod

from ctsquery.query.query import Query

__all__ = ("BaseQuerySerializer",)


class BaseQuerySerializer(ABC):
    """Abstract base class for query serializers.

    Subclasses implement `serialize` to render a `Query` into the native
    query language text of one engine.
    """

    @abstractmethod
    def serialize(self, query: Query) -> str:
        """Render the query as a complete expression, ready to be evaluated verbatim."""
        raise NotImplementedError
