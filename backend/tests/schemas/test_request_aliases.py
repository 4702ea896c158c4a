"""Request Schemas — camelCase aliases and snake_case names both accepted.

Tests:
    - Create bodies accept themeId / questionId / parentType and their snake names
    - exclude_unset dump distinguishes omitted from explicit null
    - Unknown status values rejected by QuestionUpdate
"""

import pytest
from pydantic import ValidationError

from eureka.core.domain_types import QuestionStatus
from eureka.schemas.answers import AnswerCreate, AnswerUpdate
from eureka.schemas.auth import RegisterRequest
from eureka.schemas.comments import CommentCreate
from eureka.schemas.questions import QuestionCreate, QuestionOut, QuestionUpdate


def test_question_create_accepts_alias_and_name():
    assert QuestionCreate(title="t", content="c", themeId="th").theme_id == "th"
    assert QuestionCreate(title="t", content="c", theme_id="th").theme_id == "th"


def test_answer_create_aliases():
    body = AnswerCreate(questionId="q", content="c", sourceInfo="book")
    assert (body.question_id, body.source_info) == ("q", "book")


def test_comment_create_aliases():
    body = CommentCreate(parentType="answer", parentId="a", content="c")
    assert (body.parent_type, body.parent_id) == ("answer", "a")


def test_answer_update_tracks_explicit_null():
    assert AnswerUpdate(sourceInfo=None).model_dump(exclude_unset=True) == {
        "source_info": None,
    }
    assert AnswerUpdate(content="x").model_dump(exclude_unset=True) == {"content": "x"}


def test_question_update_status_enum():
    assert QuestionUpdate(status="open").status is QuestionStatus.OPEN
    with pytest.raises(ValidationError):
        QuestionUpdate(status="closed")


def test_register_rejects_short_password():
    with pytest.raises(ValidationError):
        RegisterRequest(username="u", email="u@example.com", password="short")


def test_question_out_null_tags_become_empty_list():
    out = QuestionOut(
        id="q", user_id="u", title="t", content="c", tags=None, status="open",
        created_at="2026-01-01T00:00:00", updated_at="2026-01-01T00:00:00",
    )
    assert out.tags == []
