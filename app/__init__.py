# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# - main.py: create_app(), middleware order, exception handlers, routes
# - server.py: connect-then-listen startup
# - config.py: Environment variable loading and settings
# - cors.py: Origin policy
# - middleware.py: Access log, error translation, body size limit
# - exceptions.py: API errors and the global error translator
# - auth/, routers/: Mounted route groups
#
# The app layer is thin - it handles HTTP concerns and delegates
# record operations to the core/ package.
# =============================================================================
