"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Wire format is camelCase; snake_case names are accepted on input

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - One payload schema per entity serves both POST and PATCH (full replacement)
"""
