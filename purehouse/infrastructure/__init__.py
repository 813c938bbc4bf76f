"""Infrastructure Layer — database, worker client, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - External failures are mapped to core/errors.py types at this boundary
"""
