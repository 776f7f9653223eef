"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the HTTP boundary only
    - Domain validation (trim, length) still runs in core/note.py

Design Decisions:
    - Separate from codec records: schemas are API contracts, records are storage shape
"""
