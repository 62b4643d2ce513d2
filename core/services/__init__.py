# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .record_service import (
    RecordService,
    assessment_service,
    criterion_service,
    employee_service,
)

__all__ = [
    "RecordService",
    "assessment_service",
    "criterion_service",
    "employee_service",
]
