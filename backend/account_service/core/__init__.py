"""Core Layer — pure account logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validators, rules and the hasher are deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
