"""
Data package: Pydantic schemas and the mock company universe.
"""

__all__ = [
    "schemas",          # Pydantic schemas
    "companies",        # Mock company universe
]
