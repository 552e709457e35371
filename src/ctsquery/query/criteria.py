"""Boolean criteria trees.

A criteria tree is built from four node kinds:

- `Leaf`: an element value match on one property
- `And` / `Or`: a connector over one or more ordered children
- `Not`: the negation of exactly one child

Nodes are combined with the usual operators, mirroring the query DSL idiom:

- `leaf("name", "Me") & leaf("town", "Paris")` builds an `And`
- `a | b` builds an `Or`
- `~a` builds a `Not`

Each operator builds a new node around its operands; trees are never
flattened or reordered. Rendering is done by serializers through
`Criteria.accept` and a `CriteriaVisitor`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Tuple, TypeVar, Union

from ctsquery.exceptions import EmptyChildList, InvalidValueType, MalformedCriteria
from ctsquery.types import SCALAR_TYPES, CriteriaDict, Scalar, is_non_finite

from .property import PropertyReference

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
)

T = TypeVar("T")

PropertyLike = Union[PropertyReference, str]


class CriteriaVisitor(ABC, Generic[T]):
    """Operation over every criteria node kind."""

    @abstractmethod
    def visit_leaf(self, node: "Leaf") -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_and(self, node: "And") -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_or(self, node: "Or") -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_not(self, node: "Not") -> T:
        raise NotImplementedError


class Criteria(ABC):
    """Base class of all criteria nodes."""

    @abstractmethod
    def accept(self, visitor: CriteriaVisitor[T]) -> T:
        """Dispatch to the visitor method matching this node kind."""
        raise NotImplementedError

    @abstractmethod
    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        raise NotImplementedError

    @abstractmethod
    def to_dict(self) -> CriteriaDict:
        """Return the universal dict representation of this node.

        - Leaves become `{property: {"$eq": value}}` mappings, the property
          written in Clark notation.
        - Connectors use `{"$and": [...]}` and `{"$or": [...]}`.
        - Negation wraps with `{"$not": node}`.
        """
        raise NotImplementedError

    def __and__(self, other: "Criteria") -> "And":
        return And([self, other])

    def __or__(self, other: "Criteria") -> "Or":
        return Or([self, other])

    def __invert__(self) -> "Not":
        return Not(self)

    def __str__(self) -> str:
        return str(self.to_dict())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.to_dict()}>"


def _as_property(prop: PropertyLike) -> PropertyReference:
    if isinstance(prop, PropertyReference):
        return prop
    return PropertyReference.parse(prop)


def _check_child(child: Any, operator: str) -> Criteria:
    if not isinstance(child, Criteria):
        raise MalformedCriteria(
            "Criteria children must be Criteria nodes",
            operator=operator,
            child_type=type(child).__name__,
        )
    return child


class Leaf(Criteria):
    """Element value match of a single property against a scalar value."""

    def __init__(self, property: PropertyLike, value: Scalar) -> None:
        self.property = _as_property(property)
        if not isinstance(value, SCALAR_TYPES):
            raise InvalidValueType(
                "Unsupported criteria value type",
                property=str(self.property),
                value_type=type(value).__name__,
            )
        if is_non_finite(value):
            raise InvalidValueType(
                "Criteria value must be finite",
                property=str(self.property),
                value=str(value),
            )
        self.value = value

    def accept(self, visitor: CriteriaVisitor[T]) -> T:
        return visitor.visit_leaf(self)

    def depth(self) -> int:
        return 1

    def to_dict(self) -> CriteriaDict:
        return {self.property.to_clark(): {"$eq": self.value}}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return NotImplemented
        # bool is an int subclass, so True == 1 must not make leaves equal
        return (
            self.property == other.property
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((Leaf, self.property, type(self.value), self.value))


class _Connector(Criteria):
    """AND/OR node over an ordered, non-empty sequence of children."""

    operator = ""

    def __init__(self, children: Iterable[Criteria]) -> None:
        checked = tuple(_check_child(child, self.operator) for child in children)
        if not checked:
            raise EmptyChildList(
                f"{self.operator.upper()} criteria requires at least one child",
                operator=self.operator,
            )
        self.children: Tuple[Criteria, ...] = checked

    def depth(self) -> int:
        return 1 + max(child.depth() for child in self.children)

    def to_dict(self) -> CriteriaDict:
        return {f"${self.operator}": [child.to_dict() for child in self.children]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Connector):
            return NotImplemented
        return type(self) is type(other) and self.children == other.children

    def __hash__(self) -> int:
        return hash((type(self), self.children))


class And(_Connector):
    operator = "and"

    def accept(self, visitor: CriteriaVisitor[T]) -> T:
        return visitor.visit_and(self)


class Or(_Connector):
    operator = "or"

    def accept(self, visitor: CriteriaVisitor[T]) -> T:
        return visitor.visit_or(self)


class Not(Criteria):
    """Negation of exactly one child."""

    operator = "not"

    def __init__(self, child: Criteria) -> None:
        self.child = _check_child(child, self.operator)

    def accept(self, visitor: CriteriaVisitor[T]) -> T:
        return visitor.visit_not(self)

    def depth(self) -> int:
        return 1 + self.child.depth()

    def to_dict(self) -> CriteriaDict:
        return {"$not": self.child.to_dict()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Not):
            return NotImplemented
        return self.child == other.child

    def __hash__(self) -> int:
        return hash((Not, self.child))


# -------------------
# Factories
# -------------------


def _unpack(children: Tuple[Any, ...]) -> Tuple[Any, ...]:
    # and_([a, b]) and and_(a, b) are equivalent
    if len(children) == 1 and isinstance(children[0], (list, tuple)):
        return tuple(children[0])
    return children


def leaf(property: PropertyLike, value: Scalar) -> Leaf:
    """Build a leaf matching `property` against `value`.

    Raises:
        InvalidValueType: If value is not a str, bool, int, float, Decimal,
            date or datetime, or is a NaN or infinite number.
    """
    return Leaf(property, value)


def and_(*children: Criteria) -> And:
    """Build an AND node; raises EmptyChildList without children."""
    return And(_unpack(children))


def or_(*children: Criteria) -> Or:
    """Build an OR node; raises EmptyChildList without children."""
    return Or(_unpack(children))


def not_(child: Criteria) -> Not:
    return Not(child)
