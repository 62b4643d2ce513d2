# =============================================================================
# core/models/employee.py - Employee Schemas
# =============================================================================
# API contract for employee records. Update payloads are partial: only the
# fields a client sends are written.
# =============================================================================

from datetime import date

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """
    Schema for creating an employee.

    Example:
        {
            "full_name": "Nguyen Van An",
            "email": "an.nguyen@example.com",
            "department": "Engineering",
            "position": "Backend Developer"
        }
    """

    full_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    department: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    hired_on: date | None = None


class EmployeeUpdate(BaseModel):
    """Partial update for an employee."""

    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    department: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    hired_on: date | None = None
