"""Okta API client."""
from __future__ import annotations

from apiclients.core.client import ApiClient
from apiclients.core.pagination import LinkHeaderPagination

from .user_factor import UserFactorService


class OktaClient(ApiClient):
    """Client for an Okta organization, e.g. https://example.okta.com.

    Okta API tokens use the ``SSWS`` authorization scheme; list endpoints
    advertise further pages through ``Link: <...>; rel="next"``.
    """

    provider = "okta"
    auth_scheme = "SSWS"
    pagination = LinkHeaderPagination()

    def __init__(self, base_url: str, token: str, **kwargs):
        super().__init__(base_url, token, **kwargs)
        self.user_factor = UserFactorService(self)
