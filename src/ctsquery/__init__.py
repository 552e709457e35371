"""
This __init__.py file makes ctsquery a Python package and exposes the query
model, the CTS serializer and the `SearchEngine` for easy access.
"""

from .abc import SearchAdapter
from .engine import SearchEngine
from .query import (
    And,
    Criteria,
    Leaf,
    Not,
    Or,
    PropertyReference,
    Query,
    SortCriteria,
    and_,
    leaf,
    not_,
    or_,
)
from .serializers import CTSQuerySerializer, cts_serializer, serialize

__version__ = "0.1.0"

__all__ = [
    "SearchEngine",
    "SearchAdapter",
    "Criteria",
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
    "CTSQuerySerializer",
    "cts_serializer",
    "serialize",
]
