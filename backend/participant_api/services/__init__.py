"""Service Layer — one coroutine per participant operation.

Invariants:
    - Each operation issues at most one collection call
    - Services raise ParticipantServiceError subclasses; routes never build error bodies
"""
