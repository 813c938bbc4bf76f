"""Core Layer — pure post domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything here is deterministic given its inputs (and the clock, for dates)

Design Decisions:
    - Functional core separated from imperative shell: the lifecycle manager in
      services/ orchestrates IO around these rules
"""
