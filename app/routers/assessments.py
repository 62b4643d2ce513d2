# =============================================================================
# app/routers/assessments.py - Assessment Endpoints
# =============================================================================
# Mounted at /api/assessments. All endpoints require authentication.
# The authenticated user is stored as the assessor of new assessments.
# =============================================================================

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.auth import AuthUser, get_current_user
from core.models import AssessmentCreate, AssessmentUpdate
from core.services import assessment_service, employee_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("")
def list_assessments(
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
    employee_id: Annotated[UUID | None, Query(description="Only this employee's assessments")] = None,
    period: Annotated[str | None, Query(description="Filter by period, e.g. 2024-Q1")] = None,
) -> list[dict[str, Any]]:
    """List assessments, newest first."""
    return assessment_service.list_records(
        limit=limit,
        offset=offset,
        filters={"employee_id": employee_id, "period": period},
    )


@router.get("/{assessment_id}")
def get_assessment(
    assessment_id: Annotated[UUID, Path(description="Assessment UUID")],
) -> dict[str, Any]:
    return assessment_service.get_record(assessment_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_assessment(
    request: AssessmentCreate,
    user: AuthUser = Depends(get_current_user),
) -> dict[str, Any]:
    """
    Create an assessment for an existing employee.

    Returns 404 if the employee doesn't exist.
    """
    employee_service.get_record(request.employee_id)

    data = request.model_dump(mode="json")
    data["assessor_id"] = str(user.id)
    return assessment_service.create_record(data)


@router.patch("/{assessment_id}")
def update_assessment(
    assessment_id: Annotated[UUID, Path(description="Assessment UUID")],
    request: AssessmentUpdate,
) -> dict[str, Any]:
    return assessment_service.update_record(
        assessment_id,
        request.model_dump(mode="json", exclude_unset=True),
    )


@router.delete("/{assessment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_assessment(
    assessment_id: Annotated[UUID, Path(description="Assessment UUID")],
) -> Response:
    assessment_service.delete_record(assessment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
