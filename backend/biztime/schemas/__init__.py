"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Request schemas check shape and type only; constraints live in the database
    - Response schemas mirror the JSON bodies exactly (field names and nesting)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
