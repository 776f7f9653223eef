"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Adapters implement core.repository_protocols.KeyValueBackend
    - Adapters raise on failure; the services layer maps errors to results
"""
