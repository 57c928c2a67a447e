"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary
    - Enum fields reuse core/domain_types
"""
