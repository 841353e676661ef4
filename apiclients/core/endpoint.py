"""Declarative endpoint descriptors.

A service class lists its REST operations as ``Endpoint`` class attributes;
each one becomes a method on service instances:

    class UserFactorService(ApiService):
        get_factor = Endpoint(
            "GET", "/api/v1/users/{userId}/factors/{factorId}",
            response=UserFactor,
        )

    service.get_factor("u1", "f1")

Path placeholders turn into positional arguments (snake_case, template
order). Query and header parameters are keyword-only and default to None;
unset values are never sent. A paginated endpoint also installs an
``_all`` companion that follows every page.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Optional, Tuple, get_args, get_origin

from .encoding import build_query, encode_path, is_unset, join_url
from .marshal import coerce_body
from .pagination import PaginationStrategy, Paginator

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake(name: str) -> str:
    """``userId`` -> ``user_id``, ``X-Forwarded-For`` -> ``x_forwarded_for``."""
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def all_variant_name(name: str) -> str:
    """Name of the every-page companion: ``list_factors`` -> ``list_all_factors``."""
    verb, sep, rest = name.partition("_")
    if not sep:
        return f"{name}_all"
    return f"{verb}_all_{rest}"


class ApiService:
    """Groups the endpoints of one API resource around a shared client."""

    def __init__(self, client):
        """Initialize the service.

        Args:
            client: ApiClient the endpoints are issued through
        """
        self.client = client


class Endpoint:
    """Immutable description of one REST operation.

    Args:
        method: HTTP verb
        path: Path template with ``{placeholder}`` segments
        query: Wire names of optional query parameters, in send order
        headers: Names of optional request headers
        body: Request model type; makes ``body`` a required keyword argument
        response: Response type (model, ``list[Model]`` or None)
        paginated: Whether the response is one page of a list
        all_name: Name for the every-page companion (derived when omitted)
        pagination: Strategy overriding the client's for this endpoint
        doc: Summary shown by ``help()``
    """

    def __init__(
        self,
        method: str,
        path: str,
        *,
        query: Iterable[str] = (),
        headers: Iterable[str] = (),
        body: Optional[type] = None,
        response: Any = None,
        paginated: bool = False,
        all_name: Optional[str] = None,
        pagination: Optional[PaginationStrategy] = None,
        doc: Optional[str] = None,
    ):
        self.method = method.upper()
        self.path = path
        self.path_params: Tuple[Tuple[str, str], ...] = tuple(
            (to_snake(p), p) for p in _PLACEHOLDER.findall(path)
        )
        self.query: Tuple[Tuple[str, str], ...] = tuple((to_snake(q), q) for q in query)
        self.headers: Tuple[Tuple[str, str], ...] = tuple((to_snake(h), h) for h in headers)
        self.body = body
        self.response = response
        self.paginated = paginated
        self.all_name = all_name
        self.pagination = pagination
        self.name = ""
        self.__doc__ = f"{doc}\n\n{self.method} {path}" if doc else f"{self.method} {path}"

        if paginated:
            if self.method != "GET":
                raise ValueError(f"Paginated endpoint {path} must use GET, not {self.method}")
            if get_origin(response) is not list:
                raise ValueError(f"Paginated endpoint {path} must declare a list response")

    def __set_name__(self, owner, name: str) -> None:
        self.name = name
        if self.paginated:
            self.all_name = self.all_name or all_variant_name(name)
            setattr(owner, self.all_name, _AllPages(self))

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return BoundEndpoint(self, instance.client)

    def __repr__(self) -> str:
        return f"<Endpoint {self.name or '?'}: {self.method} {self.path}>"

    @property
    def item_type(self) -> Any:
        return get_args(self.response)[0]

    def prepare(self, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Tuple[str, Optional[Dict[str, str]], Any]:
        """Bind call arguments to (url, headers, body).

        Raises:
            TypeError: On missing, surplus or unknown arguments
            ValueError: If a path parameter is empty
            EncodeError: If the body does not fit the declared body type
        """
        kwargs = dict(kwargs)
        label = self.name or self.path
        if len(args) > len(self.path_params):
            raise TypeError(
                f"{label}() takes {len(self.path_params)} path argument(s), got {len(args)}"
            )

        path = self.path
        for position, (py_name, placeholder) in enumerate(self.path_params):
            if position < len(args):
                value = args[position]
            elif py_name in kwargs:
                value = kwargs.pop(py_name)
            else:
                raise TypeError(f"{label}() missing path argument '{py_name}'")
            if value is None or value == "":
                raise ValueError(f"{label}(): path argument '{py_name}' must not be empty")
            if str(value) in (".", ".."):
                raise ValueError(f"{label}(): path argument '{py_name}' must not be a dot segment")
            path = path.replace("{" + placeholder + "}", encode_path(value), 1)

        query = build_query((wire, kwargs.pop(py_name, None)) for py_name, wire in self.query)

        headers: Dict[str, str] = {}
        for py_name, header in self.headers:
            value = kwargs.pop(py_name, None)
            if not is_unset(value):
                headers[header] = str(value)

        body = None
        if self.body is not None:
            if "body" not in kwargs:
                raise TypeError(f"{label}() missing keyword argument 'body'")
            body = coerce_body(kwargs.pop("body"), self.body)

        if kwargs:
            raise TypeError(f"{label}() got unexpected keyword argument(s): {', '.join(sorted(kwargs))}")

        return join_url(path, query), headers or None, body

    def invoke(self, client, args, kwargs, aggregate: bool = False) -> Any:
        url, headers, body = self.prepare(args, kwargs)
        if self.paginated:
            paginator = Paginator(client, self.pagination)
            if aggregate:
                return paginator.fetch_all(url, self.item_type, headers=headers)
            return paginator.fetch_one(url, self.item_type, headers=headers)
        return client.request(self.method, url, body=body, response_type=self.response, headers=headers)


class _AllPages:
    """Every-page companion installed next to a paginated Endpoint."""

    def __init__(self, endpoint: Endpoint):
        self.endpoint = endpoint
        self.__doc__ = f"{endpoint.__doc__}\n\nReturns all pages at once."

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return BoundEndpoint(self.endpoint, instance.client, aggregate=True)


class BoundEndpoint:
    """An Endpoint attached to a client, callable like a method."""

    def __init__(self, endpoint: Endpoint, client, aggregate: bool = False):
        self.endpoint = endpoint
        self.client = client
        self.aggregate = aggregate
        self.__doc__ = endpoint.__doc__

    def __call__(self, *args, **kwargs) -> Any:
        return self.endpoint.invoke(self.client, args, kwargs, aggregate=self.aggregate)

    def __repr__(self) -> str:
        name = self.endpoint.all_name if self.aggregate else self.endpoint.name
        return f"<bound endpoint {name}: {self.endpoint.method} {self.endpoint.path}>"
