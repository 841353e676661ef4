"""Typed REST API clients for Gusto, Okta and Slack.

Usage:
    from apiclients.okta import OktaClient

    with OktaClient("https://example.okta.com", "api-token") as okta:
        factors = okta.user_factor.list_all_factors("00u1abcd")
"""
__version__ = "0.1.0"
