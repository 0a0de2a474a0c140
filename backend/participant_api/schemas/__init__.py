"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate presence and JSON types at the system boundary
    - Format checks (email, dob) live in core/validators.py so the service
      can answer with field-specific messages
"""
