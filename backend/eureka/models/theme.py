"""Theme ORM — topical grouping under which questions are organized.

Invariants:
    - created_by references the creating user, fixed at creation
    - No update or delete in scope
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from eureka.db.base import Base
from eureka.core.domain_types import new_id


class Theme(Base):
    """Topical grouping of questions."""
    __tablename__ = "themes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True,
    )
    created_by: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
