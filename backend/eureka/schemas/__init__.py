"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Request bodies accept the web client's camelCase keys and snake_case alike
    - Responses are snake_case row shapes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Blank-text rules live in core/enforce_content.py, not in validators,
      so handlers reject the same input the same way whichever entry point is used
"""
