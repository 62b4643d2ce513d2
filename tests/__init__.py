# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_config.py: Settings parsing and defaults
# - test_cors.py: Origin policy predicate and middleware
# - test_exceptions.py: Global error translation
# - test_middleware.py: Body size limit and access log
# - test_main.py / test_server.py: App assembly and startup sequencing
# - test_auth.py, test_routers.py, test_record_service.py: Collaborators
#
# Run tests with: poetry run pytest
# =============================================================================
