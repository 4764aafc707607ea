# Routes package for API endpoints

"""
Routes package for API endpoints.

This package provides:
- Company enrichment and thesis scoring
- Company search and detail
- Lists and saved searches
- Notes
"""

__all__ = [
    "company", "enrich", "lists", "saved_searches"
]
