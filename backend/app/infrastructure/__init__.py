"""Infrastructure Layer — storage backends, database sessions, and logging.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - All SQLAlchemy errors are mapped to core/errors.py types before leaving this layer
"""
