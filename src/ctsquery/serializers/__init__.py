from .base import BaseQuerySerializer
from .cts import CTSQuerySerializer, cts_serializer, serialize

__all__ = (
    "BaseQuerySerializer",
    "CTSQuerySerializer",
    "cts_serializer",
    "serialize",
)
