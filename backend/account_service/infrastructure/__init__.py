"""Infrastructure Layer — database sessions, repository implementation, logging.

Invariants:
    - Driver exceptions never cross this layer: mapped to core/errors.py types

Design Decisions:
    - Repository implements core.repository_protocols.AccountRepository structurally
"""
