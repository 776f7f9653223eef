"""Services Layer — async write-through containers over a KeyValueBackend.

Invariants:
    - Every public operation returns a Result; backend exceptions never escape
    - Each container serializes its own operations with an asyncio.Lock

Design Decisions:
    - One file per container; the shared backend-call wrapper lives in storage_guard.py
"""
