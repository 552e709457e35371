"""Query model module.

Exports the criteria tree, sort keys and the `Query` descriptor for building
engine-independent search requests. Rendered representations are handled by
the `ctsquery.serializers` package.
"""

from .criteria import And, Criteria, CriteriaVisitor, Leaf, Not, Or, and_, leaf, not_, or_
from .property import PropertyReference
from .query import Query
from .sort import SortCriteria
from .utils import normalize_criteria_input

__all__ = (
    "Criteria",
    "CriteriaVisitor",
    "Leaf",
    "And",
    "Or",
    "Not",
    "leaf",
    "and_",
    "or_",
    "not_",
    "PropertyReference",
    "Query",
    "SortCriteria",
    "normalize_criteria_input",
)
