"""Infrastructure Layer — database, repositories, identity and logging.

Invariants:
    - Infrastructure never decides domain rules; it executes what core/ allowed
    - All SQLAlchemy failures inside a request session surface as DatabaseError

Design Decisions:
    - One repo_*.py per aggregate, each implementing a core/repository_protocols.py contract
"""
