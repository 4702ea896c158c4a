"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/handle_*.py)
    - Auth mode declared per route via api/deps.py dependencies

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
