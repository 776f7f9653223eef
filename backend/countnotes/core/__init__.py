"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions return Result values; DecodeError is raised only by codec.py

Design Decisions:
    - Functional core separated from the imperative shell (services/)
"""
