"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: FastAPI dependencies (bearer-token authentication)
- errors.py: Domain exception -> HTTP response mapping
"""
