"""Gusto payroll API client."""
from .client import GustoClient
from .garnishments import GarnishmentsService
from .models import (
    Garnishment,
    PostEmployeesEmployeeIdGarnishmentsRequest,
    PutGarnishmentsGarnishmentIdRequest,
)

__all__ = [
    "GustoClient",
    "GarnishmentsService",
    "Garnishment",
    "PostEmployeesEmployeeIdGarnishmentsRequest",
    "PutGarnishmentsGarnishmentIdRequest",
]
