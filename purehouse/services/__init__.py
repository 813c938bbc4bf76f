"""Services Layer — post lifecycle orchestration and notification dispatch.

Invariants:
    - Services wire core rules to IO through protocols; no SQL or HTTP here
"""
