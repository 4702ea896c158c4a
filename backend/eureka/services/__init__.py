"""Services Layer — imperative shell around the pure core rules.

Invariants:
    - One handler class per resource (questions, answers, comments, themes, auth, users)
    - Handlers validate with core/ functions first, then write through repositories
    - Each mutating handler method commits exactly once

Design Decisions:
    - One handler file per resource for locality (ADR: no god objects)
"""
