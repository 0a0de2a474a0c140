"""Participant Record Service — CRUD API over the Participants collection.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
