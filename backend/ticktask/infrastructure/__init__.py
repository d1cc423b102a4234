"""Infrastructure Layer — database sessions, task store, and logging setup.

Invariants:
    - Only this layer talks to SQLAlchemy engines and sessions directly
    - SQLAlchemy exceptions never escape as-is (mapped to StoreError)

Design Decisions:
    - Async engine throughout: FastAPI handlers await the store round-trip
"""
