# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# Request schemas for the record routers:
# - employee.py: Employee create/update
# - criterion.py: Assessment criterion create/update
# - assessment.py: Assessment create/update with per-criterion scores
# =============================================================================

from .assessment import AssessmentCreate, AssessmentUpdate, CriterionScore
from .criterion import CriterionCreate, CriterionUpdate
from .employee import EmployeeCreate, EmployeeUpdate

__all__ = [
    "AssessmentCreate",
    "AssessmentUpdate",
    "CriterionScore",
    "CriterionCreate",
    "CriterionUpdate",
    "EmployeeCreate",
    "EmployeeUpdate",
]
