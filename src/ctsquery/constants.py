"""
Tokens of the CTS search expression language shared by serializers.
"""


class SortDirection:
    ASCENDING = "ascending"
    DESCENDING = "descending"


# Empty XQuery sequence, used for absent criteria and options
EMPTY_SEQUENCE = "()"

ALL_DOCUMENTS = "fn:collection()"

CTS_SEARCH = "cts:search"

COMPOSITE_QUERY_MAP = {
    "and": "cts:and-query",
    "or": "cts:or-query",
}
