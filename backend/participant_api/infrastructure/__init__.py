"""Infrastructure Layer — store clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls wrapped with timeout and error mapping
"""
