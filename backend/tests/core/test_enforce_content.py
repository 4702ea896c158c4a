"""Content Validation — required text, tags, comment parents, update collectors.

Tests:
    - Blank text rejected with the field name
    - Tags stripped, blanks dropped, order kept
    - Comment parent pair parsed into QuestionRef | AnswerRef, bad kinds → 400
    - Update collectors return only supplied fields and reject empty updates
"""

import pytest

from eureka.core.domain_types import AnswerRef, QuestionRef, QuestionStatus
from eureka.core.enforce_content import (
    collect_answer_updates, collect_question_updates, normalize_tags,
    parse_comment_parent, require_text,
)
from eureka.core.errors import BadRequestError


# ─── require_text / normalize_tags ──────────────────────────────

@pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
def test_require_text_rejects_blank(value):
    with pytest.raises(BadRequestError) as exc:
        require_text(value, "title")
    assert exc.value.field == "title"
    assert exc.value.message == "title is required"


def test_require_text_keeps_value_as_given():
    assert require_text("  padded  ", "content") == "  padded  "


def test_normalize_tags():
    assert normalize_tags([" physics ", "", "  ", "optics"]) == ["physics", "optics"]
    assert normalize_tags(None) == []


# ─── parse_comment_parent ───────────────────────────────────────

def test_parse_question_parent():
    assert parse_comment_parent("question", "q1") == QuestionRef("q1")


def test_parse_answer_parent():
    assert parse_comment_parent("answer", "a1") == AnswerRef("a1")


@pytest.mark.parametrize("ptype,pid", [(None, "x"), ("question", None), ("", ""), (None, None)])
def test_parent_pair_required(ptype, pid):
    with pytest.raises(BadRequestError, match="parent_type and parent_id are required"):
        parse_comment_parent(ptype, pid)


def test_unknown_parent_type_rejected():
    with pytest.raises(BadRequestError) as exc:
        parse_comment_parent("theme", "t1")
    assert "question, answer" in exc.value.message


# ─── update collectors ──────────────────────────────────────────

def test_question_updates_only_supplied_fields():
    assert collect_question_updates({"title": "New"}) == {"title": "New"}


def test_question_updates_parse_status_and_tags():
    updates = collect_question_updates({"status": "open", "tags": [" a ", ""]})
    assert updates == {"status": QuestionStatus.OPEN, "tags": ["a"]}


def test_question_update_blank_title_rejected():
    with pytest.raises(BadRequestError):
        collect_question_updates({"title": "  "})


def test_question_update_with_nothing_rejected():
    with pytest.raises(BadRequestError, match="No fields to update"):
        collect_question_updates({})


def test_answer_update_can_clear_source_info():
    assert collect_answer_updates({"source_info": None}) == {"source_info": None}


def test_answer_update_null_content_is_ignored():
    assert collect_answer_updates({"content": None, "source_info": "book"}) == {
        "source_info": "book",
    }


def test_answer_update_with_nothing_rejected():
    with pytest.raises(BadRequestError):
        collect_answer_updates({"content": None})
