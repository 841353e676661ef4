"""Okta identity API client."""
from .client import OktaClient
from .models import (
    ActivateFactorRequest,
    SecurityQuestion,
    UserFactor,
    VerifyFactorRequest,
    VerifyUserFactorResponse,
)
from .user_factor import UserFactorService

__all__ = [
    "OktaClient",
    "UserFactorService",
    "UserFactor",
    "SecurityQuestion",
    "ActivateFactorRequest",
    "VerifyFactorRequest",
    "VerifyUserFactorResponse",
]
