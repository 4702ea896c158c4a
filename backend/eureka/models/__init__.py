"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Ids are opaque UUID4 strings generated in Python, never by the database
    - Ownership columns (user_id, created_by) are set at creation and never updated

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and Base.metadata is complete before create_all / alembic
"""

from eureka.models.user import User  # noqa: F401
from eureka.models.theme import Theme  # noqa: F401
from eureka.models.question import Question  # noqa: F401
from eureka.models.answer import Answer  # noqa: F401
from eureka.models.comment import Comment  # noqa: F401
