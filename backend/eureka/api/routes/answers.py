"""Answer Routes — create, select, upvote and edit answers.

Invariants:
    - Every endpoint requires a valid bearer token
    - PUT passes only the fields the client actually sent, so an explicit
      "sourceInfo": null clears the source while an omitted one keeps it
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.api.deps import current_identity
from eureka.core.identity import Identity
from eureka.infrastructure.database import get_db
from eureka.schemas.answers import AnswerCreate, AnswerOut, AnswerUpdate
from eureka.services.handle_answers import AnswerHandlers

router = APIRouter(prefix="/api/answers", tags=["answers"])


@router.post(
    "", response_model=AnswerOut, status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    body: AnswerCreate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await AnswerHandlers(db).create_answer(
        identity, body.question_id, body.content, body.source_info,
    )


@router.post("/{answer_id}/select", response_model=AnswerOut)
async def select_answer(
    answer_id: str,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Mark as the question's selected answer (question owner only)."""
    return await AnswerHandlers(db).select_answer(identity, answer_id)


@router.post("/{answer_id}/upvote", response_model=AnswerOut)
async def upvote_answer(
    answer_id: str,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await AnswerHandlers(db).upvote_answer(identity, answer_id)


@router.put("/{answer_id}", response_model=AnswerOut)
async def update_answer(
    answer_id: str,
    body: AnswerUpdate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await AnswerHandlers(db).update_answer(
        identity, answer_id, body.model_dump(exclude_unset=True),
    )
