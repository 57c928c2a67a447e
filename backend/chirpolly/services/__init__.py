"""Services Layer: async persistence and external-call orchestration.

Invariants:
    - Services receive an AsyncSession (or gateway) and never build their own
    - Pure rules live in core/; services only load, apply, and persist
"""
