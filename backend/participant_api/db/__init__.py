"""Database Infrastructure — SQLAlchemy Base for the Participants table.

Invariants:
    - Single async engine per process (initialized via init_db)
"""
