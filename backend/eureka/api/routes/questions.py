"""Question Routes — thin adapters over QuestionHandlers.

Invariants:
    - Reads accept anonymous callers; writes require a valid bearer token
    - PUT passes only the fields the client actually sent (exclude_unset)
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.api.deps import current_identity, optional_identity
from eureka.core.domain_types import QuestionStatus
from eureka.core.identity import Identity
from eureka.infrastructure.database import get_db
from eureka.schemas.questions import (
    QuestionCreate, QuestionDetail, QuestionOut, QuestionSummary, QuestionUpdate,
)
from eureka.services.handle_questions import QuestionHandlers

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("", response_model=list[QuestionSummary])
async def list_questions(
    theme_id: str | None = Query(None),
    status_filter: QuestionStatus | None = Query(None, alias="status"),
    user_id: str | None = Query(None),
    _: Identity | None = Depends(optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Questions newest first, filtered by theme, status and owner."""
    return await QuestionHandlers(db).list_questions(
        theme_id=theme_id, status=status_filter, user_id=user_id,
    )


@router.get("/{question_id}", response_model=QuestionDetail)
async def get_question(
    question_id: str,
    _: Identity | None = Depends(optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Question with answers, selected answer first."""
    return await QuestionHandlers(db).get_question(question_id)


@router.post(
    "", response_model=QuestionOut, status_code=status.HTTP_201_CREATED,
)
async def create_question(
    body: QuestionCreate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await QuestionHandlers(db).create_question(
        identity, body.title, body.content,
        theme_id=body.theme_id, tags=body.tags,
    )


@router.put("/{question_id}", response_model=QuestionOut)
async def update_question(
    question_id: str,
    body: QuestionUpdate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await QuestionHandlers(db).update_question(
        identity, question_id, body.model_dump(exclude_unset=True),
    )
