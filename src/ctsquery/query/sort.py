"""Sort keys for search queries."""

import builtins
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ctsquery.constants import SortDirection

from .property import PropertyReference

__all__ = ("SortCriteria",)


class SortCriteria(BaseModel):
    """One ordering key: a property and a direction (ascending by default)."""

    model_config = ConfigDict(frozen=True)

    property: PropertyReference = Field(..., description="Property to order by.")
    descending: bool = Field(False, description="Order from highest to lowest.")

    def __init__(self, property: Union[PropertyReference, str], descending: bool = False, **data: Any) -> None:
        super().__init__(property=property, descending=descending, **data)

    @field_validator("property", mode="before")
    @classmethod
    def _coerce_property(cls, value: Any) -> Any:
        if isinstance(value, str):
            return PropertyReference.parse(value)
        return value

    @classmethod
    def parse(cls, text: str) -> "SortCriteria":
        """Build a sort key from `name`, `-name` (descending) or `+name`.

        Examples:
            SortCriteria.parse("-age")
            SortCriteria.parse("{http://example.com/ns}lastname")
        """
        if text.startswith("-"):
            return cls(text[1:], descending=True)
        if text.startswith("+"):
            return cls(text[1:])
        return cls(text)

    # `property` is rebound by the field above
    @builtins.property
    def direction(self) -> str:
        return SortDirection.DESCENDING if self.descending else SortDirection.ASCENDING
