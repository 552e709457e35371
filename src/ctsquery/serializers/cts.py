"""MarkLogic CTS query serializer.

Renders a `Query` into a single `cts:search` expression:

    cts:search(<collection>, <criteria>, <options>)[<first> to <last>]

- collection: `fn:collection()` or `fn:collection('name')`
- criteria: `()` or a tree of `cts:element-value-query`, `cts:and-query`,
  `cts:or-query` and `cts:not-query` calls
- options: `()` or a sequence of `cts:index-order` sort keys
- the trailing range subscript is only emitted when a limit is set

String literals are single-quoted with embedded apostrophes doubled. No other
escaping is applied.
"""

from typing import Any, Iterable, List, Optional

from ctsquery.constants import ALL_DOCUMENTS, COMPOSITE_QUERY_MAP, CTS_SEARCH, EMPTY_SEQUENCE
from ctsquery.exceptions import ConfigurationError, InvalidArgument, MalformedCriteria
from ctsquery.logger import get_logger
from ctsquery.query.criteria import And, Criteria, CriteriaVisitor, Leaf, Not, Or
from ctsquery.query.property import PropertyReference
from ctsquery.query.query import Query
from ctsquery.query.sort import SortCriteria
from ctsquery.settings import settings

from .base import BaseQuerySerializer
from .utils import format_qname, format_value, quote_string

__all__ = (
    "CTSQuerySerializer",
    "cts_serializer",
    "serialize",
)

_SKIP_POLICIES = ("ignore", "error")

logger = get_logger(__name__)


class CTSQuerySerializer(BaseQuerySerializer, CriteriaVisitor[str]):
    """Compile queries into MarkLogic `cts:search` expressions.

    The serializer holds no per-call state: one instance may be shared and
    used concurrently.

    Args:
        skip_without_limit: What to do when a query has `skip > 0` and
            `limit == 0`. `"ignore"` renders no pagination subscript,
            `"error"` raises `InvalidArgument`. Defaults to
            `settings.SKIP_WITHOUT_LIMIT`, read on every call.
    """

    def __init__(self, skip_without_limit: Optional[str] = None) -> None:
        if skip_without_limit is not None and skip_without_limit not in _SKIP_POLICIES:
            raise ConfigurationError(
                "Unknown skip-without-limit policy",
                setting="skip_without_limit",
                value=skip_without_limit,
                expected=_SKIP_POLICIES,
            )
        self.skip_without_limit = skip_without_limit

    def serialize(self, query: Query) -> str:
        expr = (
            f"{CTS_SEARCH}({self._collection_expr(query.collection)}, "
            f"{self._criteria_expr(query.criteria)}, "
            f"{self._options_expr(query.sort_criteria)})"
            f"{self._pagination_expr(query.skip, query.limit)}"
        )
        logger.debug("Serialized query: %s", expr)
        return expr

    # -------------------
    # Search arguments
    # -------------------

    def _collection_expr(self, collection: Optional[str]) -> str:
        if collection is None:
            return ALL_DOCUMENTS
        return f"fn:collection({quote_string(collection)})"

    def _criteria_expr(self, criteria: Optional[Criteria]) -> str:
        if criteria is None:
            return EMPTY_SEQUENCE
        return self._render(criteria, "root")

    def _options_expr(self, sort_criteria: List[SortCriteria]) -> str:
        if not sort_criteria:
            return EMPTY_SEQUENCE
        return "(" + ", ".join(self._index_order(sort) for sort in sort_criteria) + ")"

    def _index_order(self, sort: SortCriteria) -> str:
        reference = f"cts:element-reference({format_qname(sort.property)})"
        return f"cts:index-order({reference}, ({quote_string(sort.direction)}))"

    def _pagination_expr(self, skip: int, limit: int) -> str:
        if limit > 0:
            return f"[{skip + 1} to {skip + limit}]"
        if skip > 0:
            policy = self.skip_without_limit or settings.SKIP_WITHOUT_LIMIT
            if policy == "error":
                raise InvalidArgument("skip requires a limit", skip=skip, limit=limit)
            logger.warning("Ignoring skip=%d on a query without limit", skip)
        return ""

    # -------------------
    # Criteria tree
    # -------------------

    def _render(self, node: Any, parent: str) -> str:
        if not isinstance(node, Criteria):
            raise MalformedCriteria(
                "Criteria children must be Criteria nodes",
                operator=parent,
                child_type=type(node).__name__,
            )
        return node.accept(self)

    def _render_children(self, children: Iterable[Any], operator: str) -> str:
        if not isinstance(children, (list, tuple)):
            raise MalformedCriteria(
                f"{operator.upper()} criteria children must be a sequence",
                operator=operator,
                children_type=type(children).__name__,
            )
        rendered = [self._render(child, operator) for child in children]
        if not rendered:
            raise MalformedCriteria(f"{operator.upper()} criteria has no children", operator=operator)
        return "(" + ", ".join(rendered) + ")"

    def visit_leaf(self, node: Leaf) -> str:
        if not isinstance(node.property, PropertyReference):
            raise MalformedCriteria(
                "Leaf criteria requires a PropertyReference",
                property_type=type(node.property).__name__,
            )
        return f"cts:element-value-query({format_qname(node.property)}, {format_value(node.value)})"

    def visit_and(self, node: And) -> str:
        return f"{COMPOSITE_QUERY_MAP['and']}({self._render_children(node.children, 'and')})"

    def visit_or(self, node: Or) -> str:
        return f"{COMPOSITE_QUERY_MAP['or']}({self._render_children(node.children, 'or')})"

    def visit_not(self, node: Not) -> str:
        return f"cts:not-query({self._render(node.child, 'not')})"


cts_serializer = CTSQuerySerializer()


def serialize(query: Query) -> str:
    """Render a query with the shared CTS serializer."""
    return cts_serializer.serialize(query)
