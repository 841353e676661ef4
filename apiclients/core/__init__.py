"""Shared REST client core.

Architecture:
- encoding.py: path segment and query string encoding
- marshal.py: typed request/response marshaling (pydantic)
- client.py: HTTP client with token authentication and error handling
- pagination.py: pagination strategies and the page-following Paginator
- endpoint.py: declarative Endpoint descriptors used by provider services
- exceptions.py: typed exceptions for error handling
"""
from .exceptions import (
    ApiClientError,
    TransportError,
    HttpStatusError,
    DecodeError,
    EncodeError,
    ConfigurationError,
)
from .encoding import encode_path, build_query, is_unset, join_url
from .marshal import ApiModel, encode_body, decode_body, decode_value, coerce_body
from .pagination import (
    Page,
    PaginationStrategy,
    LinkHeaderPagination,
    CursorFieldPagination,
    Paginator,
)
from .client import ApiClient, DEFAULT_USER_AGENT
from .endpoint import ApiService, Endpoint, BoundEndpoint, all_variant_name, to_snake

__all__ = [
    # Exceptions
    "ApiClientError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "EncodeError",
    "ConfigurationError",

    # Encoding
    "encode_path",
    "build_query",
    "is_unset",
    "join_url",

    # Marshaling
    "ApiModel",
    "encode_body",
    "decode_body",
    "decode_value",
    "coerce_body",

    # Pagination
    "Page",
    "PaginationStrategy",
    "LinkHeaderPagination",
    "CursorFieldPagination",
    "Paginator",

    # Client and endpoints
    "ApiClient",
    "DEFAULT_USER_AGENT",
    "ApiService",
    "Endpoint",
    "BoundEndpoint",
    "all_variant_name",
    "to_snake",
]
