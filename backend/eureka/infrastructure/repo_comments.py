"""Comment Repository — SQLAlchemy implementation of CommentRepository.

Invariants:
    - parent_type/parent_id written from the typed CommentParent, never from raw input
    - Listings are chronological (created_at ascending)
    - Author display fields joined on every view
"""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import CommentId, CommentParent
from eureka.models.comment import Comment
from eureka.models.user import User


def _comment_view_columns():
    return (
        *Comment.__table__.columns,
        User.username, User.display_name, User.avatar_url,
    )


class SqlCommentRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, comment_data: dict, parent: CommentParent) -> CommentId:
        comment = Comment(
            **comment_data,
            parent_type=parent.parent_type.value,
            parent_id=parent.id,
        )
        self.db.add(comment)
        await self.db.flush()
        return CommentId(comment.id)

    async def get(self, comment_id: CommentId) -> dict | None:
        result = await self.db.execute(
            select(Comment.__table__).where(Comment.id == comment_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def get_view(self, comment_id: CommentId) -> dict | None:
        result = await self.db.execute(
            select(*_comment_view_columns())
            .outerjoin(User, Comment.user_id == User.id)
            .where(Comment.id == comment_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def list_views(self, parent: CommentParent) -> list[dict]:
        result = await self.db.execute(
            select(*_comment_view_columns())
            .outerjoin(User, Comment.user_id == User.id)
            .where(
                Comment.parent_type == parent.parent_type.value,
                Comment.parent_id == parent.id,
            )
            .order_by(Comment.created_at.asc()),
        )
        return [dict(r) for r in result.mappings().all()]

    async def update_content(self, comment_id: CommentId, content: str) -> None:
        await self.db.execute(
            update(Comment)
            .where(Comment.id == comment_id)
            .values(content=content),
        )

    async def delete(self, comment_id: CommentId) -> None:
        await self.db.execute(
            delete(Comment).where(Comment.id == comment_id),
        )
