"""Gusto garnishment operations.

Garnishments, or employee deductions, are fixed amounts or percentages
deducted from an employee's pay, either a set number of times or on a
recurring basis, optionally capped per year or per pay period.
"""
from __future__ import annotations
from typing import List

from apiclients.core.endpoint import ApiService, Endpoint

from .models import (
    Garnishment,
    PostEmployeesEmployeeIdGarnishmentsRequest,
    PutGarnishmentsGarnishmentIdRequest,
)


class GarnishmentsService(ApiService):
    """Service for an employee's garnishments."""

    get_employees_employee_id_garnishments = Endpoint(
        "GET", "/v1/employees/{employee_id}/garnishments",
        response=List[Garnishment],
        paginated=True,
        doc="Get garnishments for an employee.",
    )

    post_employees_employee_id_garnishments = Endpoint(
        "POST", "/v1/employees/{employee_id}/garnishments",
        body=PostEmployeesEmployeeIdGarnishmentsRequest,
        response=Garnishment,
        doc="Create a garnishment.",
    )

    get_garnishments_garnishment_id = Endpoint(
        "GET", "/v1/garnishments/{garnishment_id}",
        response=Garnishment,
        doc="Get a garnishment.",
    )

    put_garnishments_garnishment_id = Endpoint(
        "PUT", "/v1/garnishments/{garnishment_id}",
        body=PutGarnishmentsGarnishmentIdRequest,
        response=Garnishment,
        doc="Update a garnishment.",
    )
