"""Core Layer — domain types, error hierarchy, and the Storage protocol.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/, or db/
    - No IO here: backends live in infrastructure/
"""
