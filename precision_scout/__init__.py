"""
Precision Scout - Backend Package

This package contains the backend for Precision Scout, a VC deal-sourcing
workspace. It enriches startup websites with an LLM and scores them against
the fund thesis using a small, explainable rule table.

Key Components:
- FastAPI application for serving data through REST APIs
- Website fetching and HTML-to-text extraction
- NLP processing using OpenAI (with a mock mode)
- Signal engine for thesis-fit scoring
- JSON-file workspace storage and Redis caching
"""
