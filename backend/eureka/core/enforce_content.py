"""Content Validation — input rules checked before any row is written.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Text fields are rejected when empty or whitespace-only, stored as given otherwise
    - Update collectors return only fields the caller actually supplied
    - An update that supplies nothing is a BadRequest, never a silent no-op

Design Decisions:
    - Collectors take the exclude_unset dump of the request body: distinguishes
      "omitted" from "explicitly null" (source_info can be cleared, content cannot)
"""

from eureka.core.domain_types import (
    AnswerRef, CommentParent, ParentType, QuestionRef, QuestionStatus,
)
from eureka.core.errors import BadRequestError


def require_text(value: str | None, field: str) -> str:
    """Text must be present and not blank."""
    if value is None or not value.strip():
        raise BadRequestError(f"{field} is required", field=field)
    return value


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Strip tags and drop blanks, keeping the caller's order."""
    if not tags:
        return []
    return [t.strip() for t in tags if t and t.strip()]


def parse_comment_parent(
    parent_type: str | None, parent_id: str | None,
) -> CommentParent:
    """Turn the wire pair (parent_type, parent_id) into a typed parent."""
    if not parent_type or not parent_id:
        raise BadRequestError(
            "parent_type and parent_id are required", field="parent_type",
        )
    try:
        kind = ParentType(parent_type)
    except ValueError:
        raise BadRequestError(
            f"parent_type must be one of: "
            f"{', '.join(p.value for p in ParentType)}",
            field="parent_type",
        )
    if kind is ParentType.QUESTION:
        return QuestionRef(parent_id)
    return AnswerRef(parent_id)


def collect_question_updates(fields: dict) -> dict:
    """Validated column updates for a question edit."""
    updates: dict = {}
    for name in ("title", "content"):
        if fields.get(name) is not None:
            updates[name] = require_text(fields[name], name)
    if fields.get("tags") is not None:
        updates["tags"] = normalize_tags(fields["tags"])
    if fields.get("status") is not None:
        updates["status"] = QuestionStatus(fields["status"])
    if not updates:
        raise BadRequestError("No fields to update")
    return updates


def collect_answer_updates(fields: dict) -> dict:
    """Validated column updates for an answer edit."""
    updates: dict = {}
    if fields.get("content") is not None:
        updates["content"] = require_text(fields["content"], "content")
    if "source_info" in fields:
        updates["source_info"] = fields["source_info"]
    if not updates:
        raise BadRequestError("No fields to update")
    return updates
