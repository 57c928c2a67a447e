"""Database Infrastructure: declarative Base and standalone session factory.

Invariants:
    - Single async engine per process (initialized via init_db)
"""
