"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe shape only; field rules live in core/account_rules.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
