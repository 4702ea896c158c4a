"""Domain Types — verifies id helpers, enums and the comment parent union.

Tests:
    - new_id yields distinct UUID4 strings
    - Enums have expected members and values match DB strings
    - QuestionRef / AnswerRef carry their own parent_type
"""

from uuid import UUID

import pytest

from eureka.core.domain_types import (
    AnswerRef, ParentType, QuestionRef, QuestionStatus, new_id,
)


def test_new_id_is_uuid4_text():
    a, b = new_id(), new_id()
    assert a != b
    assert UUID(a).version == 4


def test_question_status_has_two_states():
    assert {s.value for s in QuestionStatus} == {"open", "answered"}


def test_parent_type_values_match_table_kinds():
    assert ParentType("question") is ParentType.QUESTION
    assert ParentType("answer") is ParentType.ANSWER
    with pytest.raises(ValueError):
        ParentType("theme")


def test_str_enums_compare_equal_to_raw_values():
    assert QuestionStatus.OPEN == "open"
    assert ParentType.ANSWER == "answer"


def test_parent_refs_name_their_kind():
    assert QuestionRef("q1").parent_type is ParentType.QUESTION
    assert AnswerRef("a1").parent_type is ParentType.ANSWER


def test_parent_refs_are_frozen_and_comparable():
    ref = QuestionRef("q1")
    assert ref == QuestionRef("q1")
    assert ref != AnswerRef("q1")
    with pytest.raises(AttributeError):
        ref.id = "q2"
