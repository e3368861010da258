"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)

Design Decisions:
    - Separate from stored documents: schemas are API contracts, documents are persistence
"""
