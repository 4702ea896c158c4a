"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ThemeId, QuestionId, AnswerId, CommentId wrap opaque str ids (UUID4 text)
    - Question status and comment parent kinds encoded as Enums — no raw string matching
    - A comment parent is EITHER a QuestionRef OR an AnswerRef, never a free-form pair

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Frozen dataclasses for the comment parent union: the variant itself names
      the table that must be checked before persistence
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import uuid4


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ThemeId = NewType("ThemeId", str)
QuestionId = NewType("QuestionId", str)
AnswerId = NewType("AnswerId", str)
CommentId = NewType("CommentId", str)


def new_id() -> str:
    """Fresh opaque identifier for any entity."""
    return str(uuid4())


# ─── Enums ───────────────────────────────────────────────────────

class QuestionStatus(str, Enum):
    """Question lifecycle states — maps to DB `status` column."""
    OPEN = "open"
    ANSWERED = "answered"


class ParentType(str, Enum):
    """Kinds of entity a comment can attach to — maps to DB `parent_type`."""
    QUESTION = "question"
    ANSWER = "answer"


# ─── Comment parent (tagged union) ───────────────────────────────

@dataclass(frozen=True)
class QuestionRef:
    """Comment parent pointing at a Question."""
    id: QuestionId
    parent_type = ParentType.QUESTION


@dataclass(frozen=True)
class AnswerRef:
    """Comment parent pointing at an Answer."""
    id: AnswerId
    parent_type = ParentType.ANSWER


CommentParent = QuestionRef | AnswerRef
