"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; storage receives only validated input
    - Wire names are camelCase (weekStart), Python names snake_case (week_start)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
