"""Comment Routes — list, create, edit and delete comments on a parent.

Invariants:
    - GET requires both parent_type and parent_id query params (400 otherwise)
    - Edit/delete require the author's bearer token
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.api.deps import current_identity, optional_identity
from eureka.core.identity import Identity
from eureka.infrastructure.database import get_db
from eureka.schemas.comments import CommentCreate, CommentOut, CommentUpdate
from eureka.schemas.common import MessageResponse
from eureka.services.handle_comments import CommentHandlers

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("", response_model=list[CommentOut])
async def list_comments(
    parent_type: str | None = Query(None),
    parent_id: str | None = Query(None),
    _: Identity | None = Depends(optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Comments of one question or answer, oldest first."""
    return await CommentHandlers(db).list_comments(parent_type, parent_id)


@router.post(
    "", response_model=CommentOut, status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CommentCreate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await CommentHandlers(db).create_comment(
        identity, body.parent_type, body.parent_id, body.content,
    )


@router.put("/{comment_id}", response_model=CommentOut)
async def update_comment(
    comment_id: str,
    body: CommentUpdate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await CommentHandlers(db).update_comment(
        identity, comment_id, body.content,
    )


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: str,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    await CommentHandlers(db).delete_comment(identity, comment_id)
    return {"message": "Comment deleted successfully"}
