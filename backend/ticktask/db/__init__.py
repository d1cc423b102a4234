"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Engine and sessions live in infrastructure/database.py, not here
"""
