# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# - models/: Pydantic request schemas
# - services/: Table-backed record operations used by the routers
# =============================================================================
