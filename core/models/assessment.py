# =============================================================================
# core/models/assessment.py - Assessment Schemas
# =============================================================================
# An assessment scores one employee for one period against a set of criteria.
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, Field


class CriterionScore(BaseModel):
    """Score given for a single criterion."""

    criterion_id: UUID
    score: float = Field(..., ge=0.0)
    note: str | None = Field(default=None, max_length=2000)


class AssessmentCreate(BaseModel):
    """
    Schema for creating an assessment.

    Example:
        {
            "employee_id": "550e8400-e29b-41d4-a716-446655440000",
            "period": "2024-Q1",
            "scores": [
                {"criterion_id": "7c9e6679-7425-40de-944b-e07fc1f90ae7", "score": 4}
            ]
        }
    """

    employee_id: UUID
    period: str = Field(..., min_length=1, max_length=64, examples=["2024-Q1"])
    scores: list[CriterionScore] = Field(default_factory=list)
    comment: str | None = Field(default=None, max_length=5000)


class AssessmentUpdate(BaseModel):
    """Partial update for an assessment."""

    period: str | None = Field(default=None, min_length=1, max_length=64)
    scores: list[CriterionScore] | None = None
    comment: str | None = Field(default=None, max_length=5000)
