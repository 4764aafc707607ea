"""
Precision Scout - Backend Application

This package implements the FastAPI service behind the sourcing workspace.

Core Components:
- main: FastAPI application setup, middleware and error handlers
- routes: REST API endpoints for enrichment, companies, lists and saved searches
- services: Enrichment pipeline, signal engine, company search and workspace state
- db: Pydantic schemas and the mock company universe
- utils: Configuration, logging, storage and date helpers

For API documentation, visit /docs when the server is running.
"""

# Version
__version__ = "1.0.0"

# Package exports
__all__ = [
    "main",           # FastAPI application
    "routes",         # API endpoints
    "services",       # Core services
    "db",             # Schemas and mock data
    "utils",          # Utilities
]
