# =============================================================================
# core/models/criterion.py - Assessment Criterion Schemas
# =============================================================================
# A criterion is one scored dimension of an assessment (e.g. "Teamwork").
# =============================================================================

from pydantic import BaseModel, Field


class CriterionCreate(BaseModel):
    """Schema for creating a criterion."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    weight: float = Field(default=1.0, ge=0.0, description="Relative weight in the total score")
    max_score: int = Field(default=5, ge=1, le=100, description="Highest score a rater can give")


class CriterionUpdate(BaseModel):
    """Partial update for a criterion."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    weight: float | None = Field(default=None, ge=0.0)
    max_score: int | None = Field(default=None, ge=1, le=100)
