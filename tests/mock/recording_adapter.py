from __future__ import annotations

from typing import Any, List, Optional

from ctsquery.abc import SearchAdapter


class RecordingAdapter(SearchAdapter):
    """In-memory adapter recording every evaluated expression.

    - Returns the configured results for every call
    - Keeps expressions in evaluation order for assertions
    """

    name = "recording"

    def __init__(self, results: Optional[List[Any]] = None) -> None:
        self.results: List[Any] = list(results or [])
        self.expressions: List[str] = []

    def execute(self, expression: str) -> List[Any]:
        self.expressions.append(expression)
        return list(self.results)

    @property
    def last_expression(self) -> Optional[str]:
        return self.expressions[-1] if self.expressions else None
