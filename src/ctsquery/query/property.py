"""Namespaced property references.

A `PropertyReference` names the document element a predicate or a sort key
addresses, as a (namespace URI, local name) pair.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ctsquery.exceptions import InvalidArgument

__all__ = ("PropertyReference",)


class PropertyReference(BaseModel):
    """Optionally namespaced property name.

    Two references are equal when both their namespace URI and local name
    are equal; instances are immutable and hashable.

    Examples:
        PropertyReference("name")
        PropertyReference("title", "http://example.com/books")
        PropertyReference.parse("{http://example.com/books}title")
    """

    model_config = ConfigDict(frozen=True)

    local_name: str = Field(..., min_length=1, description="Element local name.")
    namespace_uri: str = Field("", description="Element namespace URI, empty for no namespace.")

    def __init__(self, local_name: str, namespace_uri: str = "", **data: Any) -> None:
        if not local_name:
            raise InvalidArgument("Property local name must not be empty", namespace_uri=namespace_uri)
        super().__init__(local_name=local_name, namespace_uri=namespace_uri or "", **data)

    @classmethod
    def parse(cls, text: str) -> "PropertyReference":
        """Build a reference from Clark notation (`{ns}local`) or a bare local name."""
        if not isinstance(text, str) or not text:
            raise InvalidArgument("Property name must be a non-empty string", value=text)
        if text.startswith("{"):
            end = text.find("}")
            if end == -1:
                raise InvalidArgument("Unterminated namespace in property name", value=text)
            return cls(text[end + 1 :], text[1:end])
        return cls(text)

    def to_clark(self) -> str:
        if self.namespace_uri:
            return f"{{{self.namespace_uri}}}{self.local_name}"
        return self.local_name

    def __str__(self) -> str:
        return self.to_clark()

    def __repr__(self) -> str:
        return f"<PropertyReference: {self.to_clark()}>"
