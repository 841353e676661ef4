"""Okta factor records. Wire names are camelCase; links and embedded
resources use Okta's HAL-style ``_links`` / ``_embedded`` keys."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from apiclients.core.marshal import ApiModel


class OktaModel(ApiModel):
    model_config = ConfigDict(alias_generator=to_camel)


class UserFactor(OktaModel):
    """An enrolled (or enrollable) authentication factor."""
    id: Optional[str] = None
    factor_type: Optional[str] = None
    provider: Optional[str] = None
    vendor_name: Optional[str] = None
    status: Optional[str] = None
    created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    profile: Optional[Dict[str, Any]] = None
    verify: Optional["VerifyFactorRequest"] = None
    embedded: Optional[Dict[str, Any]] = Field(default=None, alias="_embedded")
    links: Optional[Dict[str, Any]] = Field(default=None, alias="_links")


class SecurityQuestion(OktaModel):
    question: Optional[str] = None
    question_text: Optional[str] = None
    answer: Optional[str] = None


class ActivateFactorRequest(OktaModel):
    attestation: Optional[str] = None
    client_data: Optional[str] = None
    pass_code: Optional[str] = None
    registration_data: Optional[str] = None
    state_token: Optional[str] = None


class VerifyFactorRequest(OktaModel):
    activation_token: Optional[str] = None
    answer: Optional[str] = None
    attestation: Optional[str] = None
    client_data: Optional[str] = None
    next_pass_code: Optional[str] = None
    pass_code: Optional[str] = None
    registration_data: Optional[str] = None
    state_token: Optional[str] = None


class VerifyUserFactorResponse(OktaModel):
    """Outcome of a verification, or of polling its transaction."""
    factor_result: str
    factor_result_message: Optional[str] = None
    expires_at: Optional[datetime] = None
    embedded: Optional[Dict[str, Any]] = Field(default=None, alias="_embedded")
    links: Optional[Dict[str, Any]] = Field(default=None, alias="_links")


UserFactor.model_rebuild()
