"""Okta user factor (MFA) operations."""
from __future__ import annotations
from typing import List

from apiclients.core.endpoint import ApiService, Endpoint

from .models import (
    ActivateFactorRequest,
    SecurityQuestion,
    UserFactor,
    VerifyFactorRequest,
    VerifyUserFactorResponse,
)


class UserFactorService(ApiService):
    """Service for enrolling, verifying and removing a user's factors."""

    list_factors = Endpoint(
        "GET", "/api/v1/users/{userId}/factors",
        response=List[UserFactor],
        paginated=True,
        doc="Enumerates all the enrolled factors for the specified user.",
    )

    enroll_factor = Endpoint(
        "POST", "/api/v1/users/{userId}/factors",
        query=("activate", "templateId", "tokenLifetimeSeconds", "updatePhone"),
        body=UserFactor,
        response=UserFactor,
        doc="Enrolls a user with a supported factor. templateId applies to SMS factors only.",
    )

    list_supported_factors = Endpoint(
        "GET", "/api/v1/users/{userId}/factors/catalog",
        response=List[UserFactor],
        paginated=True,
        doc="Enumerates all the supported factors that can be enrolled for the specified user.",
    )

    list_supported_security_questions = Endpoint(
        "GET", "/api/v1/users/{userId}/factors/questions",
        response=List[SecurityQuestion],
        paginated=True,
        doc="Enumerates all available security questions for a user's question factor.",
    )

    get_factor = Endpoint(
        "GET", "/api/v1/users/{userId}/factors/{factorId}",
        response=UserFactor,
        doc="Fetches a factor for the specified user.",
    )

    delete_factor = Endpoint(
        "DELETE", "/api/v1/users/{userId}/factors/{factorId}",
        doc="Unenrolls an existing factor for the specified user.",
    )

    activate_factor = Endpoint(
        "POST", "/api/v1/users/{userId}/factors/{factorId}/lifecycle/activate",
        body=ActivateFactorRequest,
        response=UserFactor,
        doc="Activates a factor. Some factors require a challenge to be issued first.",
    )

    get_factor_transaction_status = Endpoint(
        "GET", "/api/v1/users/{userId}/factors/{factorId}/transactions/{transactionId}",
        response=VerifyUserFactorResponse,
        doc="Polls factors verification transaction for status.",
    )

    verify_factor = Endpoint(
        "POST", "/api/v1/users/{userId}/factors/{factorId}/verify",
        query=("templateId", "tokenLifetimeSeconds"),
        headers=("X-Forwarded-For", "User-Agent", "Accept-Language"),
        body=VerifyFactorRequest,
        response=VerifyUserFactorResponse,
        doc="Verifies an OTP for a token or token:hardware factor.",
    )
