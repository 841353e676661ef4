"""Gusto garnishment records. Money amounts travel as decimal strings."""
from __future__ import annotations

from typing import Optional

from apiclients.core.marshal import ApiModel


class Garnishment(ApiModel):
    """A fixed amount or percentage deducted from an employee's pay."""
    id: str
    version: Optional[str] = None
    employee_id: Optional[str] = None
    active: bool = True
    amount: str
    description: Optional[str] = None
    court_ordered: bool = False
    times: Optional[int] = None
    recurring: bool = False
    annual_maximum: Optional[str] = None
    pay_period_maximum: Optional[str] = None
    deduct_as_percentage: bool = False


class PostEmployeesEmployeeIdGarnishmentsRequest(ApiModel):
    amount: str
    description: str
    court_ordered: bool
    active: Optional[bool] = None
    times: Optional[int] = None
    recurring: Optional[bool] = None
    annual_maximum: Optional[str] = None
    pay_period_maximum: Optional[str] = None
    deduct_as_percentage: Optional[bool] = None


class PutGarnishmentsGarnishmentIdRequest(ApiModel):
    """Update payload; ``version`` must match the current record."""
    version: str
    active: Optional[bool] = None
    amount: Optional[str] = None
    description: Optional[str] = None
    court_ordered: Optional[bool] = None
    times: Optional[int] = None
    recurring: Optional[bool] = None
    annual_maximum: Optional[str] = None
    pay_period_maximum: Optional[str] = None
    deduct_as_percentage: Optional[bool] = None
