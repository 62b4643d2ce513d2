# =============================================================================
# app/routers/employees.py - Employee Endpoints
# =============================================================================
# Mounted at /api/employees. All endpoints require authentication.
# =============================================================================

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.auth import AuthUser, get_current_user
from core.models import EmployeeCreate, EmployeeUpdate
from core.services import employee_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("")
def list_employees(
    limit: Annotated[int, Query(ge=1, le=200, description="Items per page")] = 50,
    offset: Annotated[int, Query(ge=0, description="Items to skip")] = 0,
    department: Annotated[str | None, Query(description="Filter by department")] = None,
) -> list[dict[str, Any]]:
    """List employees, newest first."""
    return employee_service.list_records(
        limit=limit,
        offset=offset,
        filters={"department": department},
    )


@router.get("/{employee_id}")
def get_employee(
    employee_id: Annotated[UUID, Path(description="Employee UUID")],
) -> dict[str, Any]:
    return employee_service.get_record(employee_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee(
    request: EmployeeCreate,
    user: AuthUser = Depends(get_current_user),
) -> dict[str, Any]:
    """Create an employee. The caller is recorded as `created_by`."""
    data = request.model_dump(mode="json")
    data["created_by"] = str(user.id)
    return employee_service.create_record(data)


@router.patch("/{employee_id}")
def update_employee(
    employee_id: Annotated[UUID, Path(description="Employee UUID")],
    request: EmployeeUpdate,
) -> dict[str, Any]:
    """Update only the fields present in the request body."""
    return employee_service.update_record(
        employee_id,
        request.model_dump(mode="json", exclude_unset=True),
    )


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: Annotated[UUID, Path(description="Employee UUID")],
) -> Response:
    employee_service.delete_record(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
