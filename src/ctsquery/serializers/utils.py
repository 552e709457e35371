"""Serializer utility functions.

Provides helpers for quoting string literals and formatting scalar values
as XQuery literals.
"""

from datetime import date
from decimal import Decimal
from typing import Any

from ctsquery.exceptions import UnsupportedValueType
from ctsquery.query.property import PropertyReference
from ctsquery.types import is_non_finite


def quote_string(value: str) -> str:
    """Quote a string as a single-quoted literal, doubling embedded apostrophes.

    No other character is escaped.
    """
    return "'" + value.replace("'", "''") + "'"


def format_value(v: Any) -> str:
    """Format a criteria value as a literal.

    Strings are quoted; other scalars are written unquoted in their canonical
    text form.

    Raises:
        UnsupportedValueType: If the value is not a supported scalar
    """
    if isinstance(v, str):
        return quote_string(v)
    if is_non_finite(v):
        raise UnsupportedValueType("Cannot render non-finite value", value=str(v))
    # bool before int: bool is an int subclass
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float):
        return repr(v)
    if isinstance(v, Decimal):
        return str(v)
    # covers datetime, a date subclass
    if isinstance(v, date):
        return v.isoformat()
    raise UnsupportedValueType("Cannot render criteria value", value_type=type(v).__name__)


def format_qname(prop: PropertyReference) -> str:
    """Render a property as an `fn:QName(namespace, local-name)` call."""
    return f"fn:QName({quote_string(prop.namespace_uri)}, {quote_string(prop.local_name)})"
