# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# Record routers, each mounted in main.py with a URL prefix:
# - employees.py: /api/employees
# - assessments.py: /api/assessments
# - criteria.py: /api/criteria
#
# Authentication routes live in app/auth/routes.py (/api/auth).
#
# Handlers that touch the database are plain `def`: the Supabase client is
# synchronous, and FastAPI runs sync handlers in its threadpool.
# =============================================================================

from . import assessments
from . import criteria
from . import employees

__all__ = [
    "assessments",
    "criteria",
    "employees",
]
