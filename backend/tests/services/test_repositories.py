"""Repositories — SQL behavior below the handlers, on a real SQLite session.

Invariants:
    - reassign_selected_answer leaves exactly one selected answer and an answered question
    - clear_selected_answer leaves none
    - increment_upvotes is a server-side +1 (stale ORM copies don't overwrite it)
    - Count subqueries report 0 for parents with no children
    - DatabaseSessionManager maps SQLAlchemy failures to DatabaseError
"""

import pytest
from sqlalchemy import text

from eureka.core.domain_types import QuestionRef
from eureka.core.enforce_resolution import derive_status
from eureka.core.errors import DatabaseError
from eureka.infrastructure.database import DatabaseSessionManager
from eureka.infrastructure.repo_answers import SqlAnswerRepository
from eureka.infrastructure.repo_comments import SqlCommentRepository
from eureka.infrastructure.repo_questions import SqlQuestionRepository
from eureka.infrastructure.repo_themes import SqlThemeRepository
from eureka.infrastructure.repo_users import SqlUserRepository


def _status_agrees_with_selection(status: str, selected: int) -> bool:
    return selected <= 1 and status == derive_status(selected).value


@pytest.fixture
async def seeded(test_db):
    """One user, one question, three answers."""
    users = SqlUserRepository(test_db)
    user_id = await users.add({
        "username": "owner", "email": "owner@example.com", "password_hash": "x",
    })
    question_id = await SqlQuestionRepository(test_db).add({
        "user_id": user_id, "title": "T", "content": "C", "tags": [],
        "status": "open",
    })
    answers = SqlAnswerRepository(test_db)
    answer_ids = [
        await answers.add({"question_id": question_id, "user_id": user_id, "content": c})
        for c in ("a", "b", "c")
    ]
    await test_db.commit()
    return {"user_id": user_id, "question_id": question_id, "answer_ids": answer_ids}


async def test_reassign_keeps_single_selection(test_db, seeded):
    answers = SqlAnswerRepository(test_db)
    questions = SqlQuestionRepository(test_db)
    qid = seeded["question_id"]

    for target in seeded["answer_ids"]:
        await answers.reassign_selected_answer(qid, target)
        await test_db.commit()
        selected = await answers.count_selected(qid)
        status = (await questions.get(qid))["status"]
        assert selected == 1
        assert _status_agrees_with_selection(status, selected)
        assert (await answers.get(target))["is_selected"] is True


async def test_clear_selection(test_db, seeded):
    answers = SqlAnswerRepository(test_db)
    qid = seeded["question_id"]
    await answers.reassign_selected_answer(qid, seeded["answer_ids"][0])
    await answers.clear_selected_answer(qid)
    await test_db.commit()
    assert await answers.count_selected(qid) == 0


async def test_reassign_ignores_answers_of_other_questions(test_db, seeded):
    answers = SqlAnswerRepository(test_db)
    other_qid = await SqlQuestionRepository(test_db).add({
        "user_id": seeded["user_id"], "title": "Other", "content": "C",
        "tags": [], "status": "open",
    })
    await answers.reassign_selected_answer(other_qid, seeded["answer_ids"][0])
    await test_db.commit()
    assert await answers.count_selected(seeded["question_id"]) == 0
    assert await answers.count_selected(other_qid) == 0


async def test_increment_is_server_side(test_db, seeded):
    answers = SqlAnswerRepository(test_db)
    aid = seeded["answer_ids"][0]
    for _ in range(3):
        await answers.increment_upvotes(aid)
    await test_db.commit()
    assert (await answers.get(aid))["upvotes"] == 3


async def test_counts_default_to_zero(test_db, seeded):
    theme_id = await SqlThemeRepository(test_db).add({
        "title": "Empty", "created_by": seeded["user_id"],
    })
    await test_db.commit()
    themes = await SqlThemeRepository(test_db).list_views()
    assert {t["id"]: t["question_count"] for t in themes} == {theme_id: 0}

    questions = await SqlQuestionRepository(test_db).list_views()
    assert questions[0]["answer_count"] == 3


async def test_comment_parent_stored_from_ref(test_db, seeded):
    comments = SqlCommentRepository(test_db)
    ref = QuestionRef(seeded["question_id"])
    comment_id = await comments.add(
        {"user_id": seeded["user_id"], "content": "hi"}, ref,
    )
    await test_db.commit()
    row = await comments.get(comment_id)
    assert row["parent_type"] == "question"
    assert row["parent_id"] == seeded["question_id"]
    assert [c["id"] for c in await comments.list_views(ref)] == [comment_id]


async def test_activity_totals(test_db, seeded):
    answers = SqlAnswerRepository(test_db)
    await answers.increment_upvotes(seeded["answer_ids"][1])
    await test_db.commit()
    activity = await SqlUserRepository(test_db).get_activity(seeded["user_id"], 2)
    assert activity["stats"] == {
        "question_count": 1, "answer_count": 3, "total_upvotes": 1,
    }
    assert len(activity["recent_answers"]) == 2


# ─── session manager ────────────────────────────────────────────

async def test_session_maps_sqlalchemy_errors(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc.value.http_status == 500
    assert await manager.health_check() is True


async def test_sql_repositories_satisfy_core_protocols(test_db):
    from eureka.core import repository_protocols as protocols

    assert isinstance(SqlUserRepository(test_db), protocols.UserRepository)
    assert isinstance(SqlThemeRepository(test_db), protocols.ThemeRepository)
    assert isinstance(SqlQuestionRepository(test_db), protocols.QuestionRepository)
    assert isinstance(SqlAnswerRepository(test_db), protocols.AnswerRepository)
    assert isinstance(SqlCommentRepository(test_db), protocols.CommentRepository)
