"""Infrastructure Layer: database, logging, and external service clients.

Invariants:
    - External SDK errors are mapped to ChirpollyError subclasses here
"""
