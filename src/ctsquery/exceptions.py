"""Custom exceptions for the ctsquery library.

This module defines all custom exceptions raised while building queries and
rendering them into CTS expressions, for consistent error handling and clear
error messaging.
"""

from typing import Any, Dict


# Base exception
class CtsQueryError(Exception):
    """Base exception for all ctsquery errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., field, value, variant)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Construction-time exceptions
class ValidationError(CtsQueryError):
    """Raised when a query or criteria node is built from invalid input.

    Example:
        >>> raise ValidationError("Invalid query input", field="collection")
    """


class InvalidValueType(ValidationError):
    """Raised when a leaf criteria is built with a value the serializer cannot render.

    Example:
        >>> raise InvalidValueType("Unsupported value type", property="age", value_type="list")
    """


class EmptyChildList(ValidationError):
    """Raised when an AND/OR criteria is built without children.

    Example:
        >>> raise EmptyChildList("Composite criteria requires children", operator="and")
    """


class InvalidArgument(ValidationError):
    """Raised when a query field is set to an out-of-range value.

    Example:
        >>> raise InvalidArgument("Value must be >= 0", field="limit", value=-1)
    """


# Serialization exceptions
class SerializationError(CtsQueryError):
    """Raised when a query cannot be rendered into an expression.

    Example:
        >>> raise SerializationError("Cannot render query", serializer="cts")
    """


class MalformedCriteria(SerializationError):
    """Raised when a criteria tree violates arity rules during rendering.

    Example:
        >>> raise MalformedCriteria("AND criteria has no children", operator="and")
    """


class UnsupportedValueType(SerializationError):
    """Raised when a value of unknown type reaches the serializer.

    Example:
        >>> raise UnsupportedValueType("Cannot render value", value_type="set")
    """


# Configuration exceptions
class ConfigurationError(CtsQueryError):
    """Raised when configuration is invalid.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="SKIP_WITHOUT_LIMIT", value="drop")
    """
