"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Err results are raised with unwrap() and rendered by error_handlers.py
"""
