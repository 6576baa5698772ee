# flake8: noqa: F401
from .query_init import JsonapiQuery, jsonapi_query, log
from .errors import JsonapiError, InvalidQuery
from .schema import ResourceSchema
from .include_tree import IncludeTree
from .query_spec import QuerySpec, SortDirection, SortField
from .query_parser import parse_sort, parse_filter, parse_fields, parse_include, QuerySpecBuilder, QueryResult
from .request import parse_query_args
from .__about__ import __version__, __description__

__all__ = (
    "__version__",
    "__description__",
    # flask:
    "JsonapiQuery",
    "jsonapi_query",
    "parse_query_args",
    # schema:
    "ResourceSchema",
    # query spec:
    "QuerySpec",
    "SortDirection",
    "SortField",
    "IncludeTree",
    # parser:
    "parse_sort",
    "parse_filter",
    "parse_fields",
    "parse_include",
    "QuerySpecBuilder",
    "QueryResult",
    # Errors:
    "JsonapiError",
    "InvalidQuery",
)
