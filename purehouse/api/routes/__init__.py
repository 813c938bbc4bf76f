"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with a resource prefix and tags;
      the global /api prefix is applied in main.py
    - Routes never contain business logic
"""
