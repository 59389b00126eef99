"""Services Layer — orchestration of rules, hasher and repository per operation.

Invariants:
    - Services receive their collaborators explicitly (no module-level singletons)
"""
