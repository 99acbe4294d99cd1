"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store records so that the API
representation and validation rules can change without touching the
stores.
"""
