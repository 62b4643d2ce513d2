# =============================================================================
# app/routers/criteria.py - Assessment Criteria Endpoints
# =============================================================================
# Mounted at /api/criteria. All endpoints require authentication.
# =============================================================================

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.auth import get_current_user
from core.models import CriterionCreate, CriterionUpdate
from core.services import criterion_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("")
def list_criteria(
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[dict[str, Any]]:
    return criterion_service.list_records(limit=limit, offset=offset)


@router.get("/{criterion_id}")
def get_criterion(
    criterion_id: Annotated[UUID, Path(description="Criterion UUID")],
) -> dict[str, Any]:
    return criterion_service.get_record(criterion_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_criterion(request: CriterionCreate) -> dict[str, Any]:
    return criterion_service.create_record(request.model_dump(mode="json"))


@router.patch("/{criterion_id}")
def update_criterion(
    criterion_id: Annotated[UUID, Path(description="Criterion UUID")],
    request: CriterionUpdate,
) -> dict[str, Any]:
    return criterion_service.update_record(
        criterion_id,
        request.model_dump(mode="json", exclude_unset=True),
    )


@router.delete("/{criterion_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_criterion(
    criterion_id: Annotated[UUID, Path(description="Criterion UUID")],
) -> Response:
    criterion_service.delete_record(criterion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
