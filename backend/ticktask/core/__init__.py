"""Core Layer — domain types, error hierarchy, and store contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/

Design Decisions:
    - Service and store meet at the Protocol in repository_protocols.py
"""
