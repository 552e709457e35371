"""Type aliases for the ctsquery package.

This module provides reusable type definitions to ensure consistency
across the codebase and improve code readability.
"""

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Tuple, Type, Union

# Scalar values a leaf criteria may carry
Scalar = Union[str, bool, int, float, Decimal, date, datetime]

SCALAR_TYPES: Tuple[Type[Any], ...] = (str, bool, int, float, Decimal, date, datetime)

# Universal dict form of a criteria tree
CriteriaDict = Dict[str, Any]


def is_non_finite(value: Any) -> bool:
    """True for NaN and infinite floats or Decimals, which have no bare literal."""
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, Decimal):
        return not value.is_finite()
    return False
