"""Tests for criteria trees: construction rules, operators, dict form."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ctsquery.exceptions import EmptyChildList, InvalidValueType, MalformedCriteria, ValidationError
from ctsquery.query import And, Criteria, Leaf, Not, Or, PropertyReference, and_, leaf, not_, or_
from ctsquery.query.utils import criteria_from_dict, normalize_criteria_input


class TestLeaf:
    """Test leaf construction and value checks."""

    @pytest.mark.parametrize(
        "value",
        ["Me", 38, 1.5, Decimal("10.25"), True, date(2017, 8, 1), datetime(2017, 8, 1, 12, 30)],
    )
    def test_supported_values(self, value):
        node = leaf("name", value)
        assert isinstance(node, Leaf)
        assert node.value == value

    @pytest.mark.parametrize("value", [None, [1, 2], {"a": 1}, object(), b"bytes"])
    def test_unsupported_values_rejected(self, value):
        with pytest.raises(InvalidValueType) as exc_info:
            leaf("name", value)
        assert exc_info.value.details["value_type"] == type(value).__name__

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")],
    )
    def test_non_finite_numbers_rejected(self, value):
        with pytest.raises(InvalidValueType) as exc_info:
            leaf("score", value)
        assert exc_info.value.details["value"] == str(value)

    def test_invalid_value_type_is_validation_error(self):
        with pytest.raises(ValidationError):
            leaf("name", None)

    def test_string_property_is_parsed(self):
        node = leaf("{http://example.com/books}title", "Dune")
        assert node.property == PropertyReference("title", "http://example.com/books")

    def test_property_reference_kept(self, title_ref):
        node = leaf(title_ref, "Dune")
        assert node.property is title_ref

    def test_leaf_equality_is_structural(self):
        assert leaf("name", "Me") == leaf("name", "Me")
        assert leaf("name", "Me") != leaf("name", "You")
        assert hash(leaf("age", 38)) == hash(leaf("age", 38))

    def test_bool_and_int_leaves_differ(self):
        assert leaf("flag", True) != leaf("flag", 1)


class TestComposites:
    """Test AND / OR / NOT construction rules."""

    def test_and_preserves_order(self, name_leaf, town_leaf):
        node = and_(name_leaf, town_leaf)
        assert isinstance(node, And)
        assert node.children == (name_leaf, town_leaf)

    def test_or_accepts_list(self, name_leaf, town_leaf):
        node = or_([town_leaf, name_leaf])
        assert isinstance(node, Or)
        assert node.children == (town_leaf, name_leaf)

    def test_duplicate_children_kept(self, name_leaf):
        node = and_(name_leaf, name_leaf)
        assert len(node.children) == 2

    def test_single_child_allowed(self, name_leaf):
        assert and_(name_leaf).children == (name_leaf,)

    @pytest.mark.parametrize("factory", [and_, or_])
    def test_empty_children_rejected(self, factory):
        with pytest.raises(EmptyChildList):
            factory()

    def test_empty_list_rejected(self):
        with pytest.raises(EmptyChildList) as exc_info:
            and_([])
        assert exc_info.value.details["operator"] == "and"

    def test_non_criteria_child_rejected(self, name_leaf):
        with pytest.raises(MalformedCriteria):
            and_(name_leaf, "town = Paris")

    def test_not_wraps_single_child(self, name_leaf):
        node = not_(name_leaf)
        assert isinstance(node, Not)
        assert node.child is name_leaf

    def test_not_requires_criteria(self):
        with pytest.raises(MalformedCriteria):
            not_({"name": "Me"})

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Criteria()


class TestOperators:
    """Test &, | and ~ build new nodes without flattening."""

    def test_and_operator(self, name_leaf, town_leaf):
        assert name_leaf & town_leaf == And([name_leaf, town_leaf])

    def test_or_operator(self, name_leaf, town_leaf):
        assert name_leaf | town_leaf == Or([name_leaf, town_leaf])

    def test_invert_operator(self, name_leaf):
        assert ~name_leaf == Not(name_leaf)

    def test_double_negation_not_collapsed(self, name_leaf):
        node = ~~name_leaf
        assert isinstance(node, Not)
        assert isinstance(node.child, Not)

    def test_chained_and_is_nested(self, name_leaf, town_leaf):
        third = leaf("age", 38)
        node = name_leaf & town_leaf & third
        assert len(node.children) == 2
        assert isinstance(node.children[0], And)

    def test_and_or_are_distinct(self, name_leaf, town_leaf):
        assert (name_leaf & town_leaf) != (name_leaf | town_leaf)


class TestDepth:
    def test_leaf_depth(self, name_leaf):
        assert name_leaf.depth() == 1

    def test_nested_depth(self, name_leaf, town_leaf):
        node = ~(name_leaf & (town_leaf | leaf("age", 38)))
        assert node.depth() == 4


class TestDictForm:
    """Test the universal dict representation and its inverse."""

    def test_leaf_to_dict(self, name_leaf):
        assert name_leaf.to_dict() == {"name": {"$eq": "Me"}}

    def test_namespaced_leaf_to_dict(self, title_ref):
        assert leaf(title_ref, "Dune").to_dict() == {"{http://example.com/books}title": {"$eq": "Dune"}}

    def test_tree_to_dict(self, name_leaf, town_leaf):
        node = ~(name_leaf | town_leaf)
        assert node.to_dict() == {"$not": {"$or": [{"name": {"$eq": "Me"}}, {"town": {"$eq": "Paris"}}]}}

    def test_str_and_repr(self, name_leaf, town_leaf):
        node = name_leaf & town_leaf
        assert "$and" in str(node)
        assert repr(node).startswith("<And:")

    def test_from_dict_round_trip(self, name_leaf, town_leaf):
        node = ~(name_leaf & (town_leaf | leaf("age", 38)))
        assert criteria_from_dict(node.to_dict()) == node

    def test_from_dict_plain_values(self):
        node = criteria_from_dict({"name": "Me", "town": "Paris"})
        assert node == And([leaf("name", "Me"), leaf("town", "Paris")])

    def test_from_dict_single_field(self):
        assert criteria_from_dict({"age": {"$eq": 38}}) == leaf("age", 38)

    def test_from_dict_rejects_other_operators(self):
        with pytest.raises(ValidationError):
            criteria_from_dict({"age": {"$gte": 18}})

    def test_from_dict_rejects_mixed_connector(self):
        with pytest.raises(ValidationError):
            criteria_from_dict({"$and": [{"a": 1}], "b": 2})

    def test_from_dict_empty_rejected(self):
        with pytest.raises(EmptyChildList):
            criteria_from_dict({})

    def test_normalize_passes_criteria_through(self, name_leaf):
        assert normalize_criteria_input(name_leaf) is name_leaf

    def test_normalize_rejects_invalid(self):
        with pytest.raises(TypeError):
            normalize_criteria_input(["invalid"])

    @pytest.mark.parametrize("node", [{"$and": ["name"]}, {"$or": [{"a": 1}, 2]}, {"$not": "name"}])
    def test_from_dict_rejects_non_mapping_entries(self, node):
        with pytest.raises(MalformedCriteria):
            criteria_from_dict(node)

    def test_from_dict_rejects_connector_without_list(self):
        with pytest.raises(MalformedCriteria) as exc_info:
            criteria_from_dict({"$and": {"name": "Me"}})
        assert exc_info.value.details["children_type"] == "dict"
