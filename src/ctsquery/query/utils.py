"""Criteria normalization helpers.

Provides conversion from the universal dict form back into criteria trees so
callers may hand either representation to a `Query`.
"""

from typing import Any, Dict, List

from ctsquery.exceptions import MalformedCriteria, ValidationError

from .criteria import And, Criteria, Leaf, Not, Or


def normalize_criteria_input(criteria: Any) -> Criteria:
    """Normalize a Criteria node or universal dict to a Criteria node.

    Args:
        criteria: Criteria node, or dict such as
            `{"$and": [{"name": "Me"}, {"town": {"$eq": "Paris"}}]}`

    Returns:
        Criteria tree ready for serialization

    Raises:
        TypeError: If input is neither a Criteria node nor a dict
    """
    if isinstance(criteria, Criteria):
        return criteria
    elif isinstance(criteria, dict):
        return criteria_from_dict(criteria)
    else:
        raise TypeError(f"criteria must be a Criteria node or dict, got {type(criteria).__name__}")


def criteria_from_dict(node: Dict[str, Any]) -> Criteria:
    """Build a criteria tree from its universal dict representation.

    Connector keys (`$and`, `$or`, `$not`) must be the only key of their
    mapping. Any other key is a property name in Clark notation whose value
    is either a scalar or `{"$eq": scalar}`; several properties in one
    mapping are combined with AND in key order.

    Raises:
        MalformedCriteria: If an entry or a connector list has the wrong shape
        ValidationError: If a connector shares its mapping or an operator other than `$eq` is used
    """
    if not isinstance(node, dict):
        raise MalformedCriteria("Criteria entries must be mappings", node_type=type(node).__name__)
    if "$and" in node or "$or" in node or "$not" in node:
        if len(node) != 1:
            raise ValidationError("Connector must be the only key of its mapping", keys=sorted(node))
        if "$and" in node:
            return And([criteria_from_dict(child) for child in _connector_children(node, "$and")])
        if "$or" in node:
            return Or([criteria_from_dict(child) for child in _connector_children(node, "$or")])
        return Not(criteria_from_dict(node["$not"]))

    leaves: List[Criteria] = []
    for field, expr in node.items():
        if isinstance(expr, dict):
            if set(expr) != {"$eq"}:
                raise ValidationError("Only $eq is supported", property=field, operators=sorted(expr))
            expr = expr["$eq"]
        leaves.append(Leaf(field, expr))
    if len(leaves) == 1:
        return leaves[0]
    # An empty mapping falls through to And([]) which raises EmptyChildList
    return And(leaves)


def _connector_children(node: Dict[str, Any], key: str) -> List[Any]:
    children = node[key]
    if not isinstance(children, (list, tuple)):
        raise MalformedCriteria(f"{key} expects a list of mappings", children_type=type(children).__name__)
    return list(children)
