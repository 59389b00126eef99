"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response is JSON (or empty for preflight) and carries CORS headers

Design Decisions:
    - Thin routes delegate to services/account_handlers.py (ADR: impureim sandwich)
"""
