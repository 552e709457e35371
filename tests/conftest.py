"""Pytest configuration and fixtures for query and serializer tests."""

import pytest
from dotenv import load_dotenv

from ctsquery.query import PropertyReference, Query, SortCriteria, leaf
from ctsquery.serializers.cts import CTSQuerySerializer

from tests.mock.recording_adapter import RecordingAdapter

# Load environment variables
load_dotenv()

BOOKS_NS = "http://example.com/books"


@pytest.fixture
def serializer():
    """Serializer with the default (ignore) skip-without-limit policy."""
    return CTSQuerySerializer(skip_without_limit="ignore")


@pytest.fixture
def name_leaf():
    return leaf("name", "Me")


@pytest.fixture
def town_leaf():
    return leaf("town", "Paris")


@pytest.fixture
def title_ref():
    return PropertyReference("title", BOOKS_NS)


@pytest.fixture
def people_query(name_leaf, town_leaf):
    """Paginated, sorted query over the people collection."""
    return Query(
        collection="people",
        criteria=name_leaf & town_leaf,
        sort_criteria=[SortCriteria("age", descending=True), SortCriteria("lastname")],
        skip=20,
        limit=10,
    )


@pytest.fixture
def recording_adapter():
    return RecordingAdapter()
