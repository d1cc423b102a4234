"""Services Layer — task use cases between the HTTP routes and the store.

Invariants:
    - Services depend on the TaskRepository protocol, never on SQLAlchemy
    - No local recovery: store errors propagate unchanged
"""
