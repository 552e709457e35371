"""Search query descriptor.

A `Query` gathers everything needed to render one search request: the
collection to search in, the criteria tree, the sort keys and pagination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Union

from ctsquery.exceptions import InvalidArgument

from .criteria import Criteria
from .sort import SortCriteria
from .utils import normalize_criteria_input

if TYPE_CHECKING:
    from ctsquery.serializers.base import BaseQuerySerializer

__all__ = ("Query",)


def _check_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer", field=name, value=value)
    if value < 0:
        raise InvalidArgument(f"{name} must be >= 0", field=name, value=value)
    return value


class Query:
    """Description of one search request.

    Fields are validated one at a time when set; how they combine is up to
    the serializer. A `limit` of 0 means unlimited.

    Examples:
        query = Query(collection="people", criteria=leaf("name", "Me"), limit=10)
        query.sort_criteria = ["-age", "lastname"]
        query.to_cts()
    """

    def __init__(
        self,
        collection: Optional[str] = None,
        criteria: Union[Criteria, dict, None] = None,
        sort_criteria: Iterable[Union[SortCriteria, str]] = (),
        skip: int = 0,
        limit: int = 0,
    ) -> None:
        self.collection = collection
        self.criteria = criteria
        self.sort_criteria = sort_criteria
        self.skip = skip
        self.limit = limit

    @property
    def collection(self) -> Optional[str]:
        """Collection to search within, or None to search every document."""
        return self._collection

    @collection.setter
    def collection(self, value: Optional[str]) -> None:
        if value is not None and not isinstance(value, str):
            raise InvalidArgument("collection must be a string", field="collection", value=value)
        self._collection = value

    @property
    def criteria(self) -> Optional[Criteria]:
        return self._criteria

    @criteria.setter
    def criteria(self, value: Union[Criteria, dict, None]) -> None:
        self._criteria = None if value is None else normalize_criteria_input(value)

    @property
    def sort_criteria(self) -> List[SortCriteria]:
        return self._sort_criteria

    @sort_criteria.setter
    def sort_criteria(self, value: Iterable[Union[SortCriteria, str]]) -> None:
        if isinstance(value, (str, SortCriteria)):
            value = [value]
        items: List[SortCriteria] = []
        for item in value or ():
            if isinstance(item, str):
                item = SortCriteria.parse(item)
            elif not isinstance(item, SortCriteria):
                raise InvalidArgument(
                    "sort_criteria items must be SortCriteria or str",
                    field="sort_criteria",
                    item_type=type(item).__name__,
                )
            items.append(item)
        self._sort_criteria = items

    @property
    def skip(self) -> int:
        return self._skip

    @skip.setter
    def skip(self, value: int) -> None:
        self._skip = _check_count("skip", value)

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        self._limit = _check_count("limit", value)

    @property
    def is_paginated(self) -> bool:
        return self._limit > 0

    def paginate(self, skip: int = 0, limit: int = 0) -> "Query":
        """Set skip and limit together and return self for chaining."""
        self.skip = skip
        self.limit = limit
        return self

    def copy(self) -> "Query":
        """Return an independent copy sharing the same criteria tree."""
        return Query(
            collection=self._collection,
            criteria=self._criteria,
            sort_criteria=list(self._sort_criteria),
            skip=self._skip,
            limit=self._limit,
        )

    def to_cts(self, serializer: Optional[BaseQuerySerializer] = None) -> str:
        """Render this query, with the CTS serializer unless another is given."""
        if serializer is None:
            from ctsquery.serializers.cts import cts_serializer

            serializer = cts_serializer
        return serializer.serialize(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return (
            self._collection == other._collection
            and self._criteria == other._criteria
            and self._sort_criteria == other._sort_criteria
            and self._skip == other._skip
            and self._limit == other._limit
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        sort = [("-" if s.descending else "") + str(s.property) for s in self._sort_criteria]
        return (
            f"<Query: collection={self._collection!r} criteria={self._criteria!r} "
            f"sort={sort!r} skip={self._skip} limit={self._limit}>"
        )
