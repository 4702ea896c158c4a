"""Resolution Rules — the open/answered state machine for questions.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - status == answered iff exactly one answer of the question is selected
    - answered is only ever reached through answer selection; a status edit to
      answered is accepted only when a selection already exists
    - open (reopen) is always reachable by the owner and implies clearing the selection

Design Decisions:
    - Answer ranking applied in Python after the fetch: one rule for every
      backend, independent of how a dialect sorts booleans
"""

from datetime import datetime

from eureka.core.domain_types import QuestionStatus
from eureka.core.errors import BadRequestError


def derive_status(selected_count: int) -> QuestionStatus:
    """The status a question must have for a given number of selected answers."""
    return QuestionStatus.ANSWERED if selected_count == 1 else QuestionStatus.OPEN


def resolve_requested_status(
    requested: QuestionStatus, selected_count: int,
) -> QuestionStatus:
    """Validate an owner's explicit status edit against the selection state."""
    if (
        requested is QuestionStatus.ANSWERED
        and derive_status(selected_count) is not QuestionStatus.ANSWERED
    ):
        raise BadRequestError(
            "A question becomes answered by selecting an answer",
            field="status",
        )
    return requested


def answer_rank_key(answer: dict) -> tuple[bool, int, datetime]:
    """Sort key: selected answer first, then most upvoted, then oldest."""
    return (
        not answer["is_selected"],
        -int(answer["upvotes"]),
        answer["created_at"],
    )


def rank_answers(answers: list[dict]) -> list[dict]:
    return sorted(answers, key=answer_rank_key)
