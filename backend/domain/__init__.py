"""
Domain Layer

This package contains the core domain types, separated from persistence
concerns and infrastructure.

Structure:
- value_objects/: Immutable value types without identity (paging)
- result.py: Success/failure outcome returned by endpoint operations
"""
