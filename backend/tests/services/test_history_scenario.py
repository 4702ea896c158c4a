"""History Scenario — one question's full life across three users.

Flow:
    alice creates a theme and asks under it, bob and carol answer,
    carol comments on bob's answer, alice upvotes and selects,
    then changes her mind and selects carol's answer instead.
"""


async def test_full_question_lifecycle(
    client, alice, bob, carol, post_question, post_answer,
):
    theme = (await client.post(
        "/api/themes", json={"title": "History", "category": "humanities"},
        headers=alice["headers"],
    )).json()
    q = await post_question(
        alice, title="Why did Rome fall?", content="Looking for causes.",
        themeId=theme["id"], tags=["rome", "empire"],
    )
    bob_answer = await post_answer(bob, q["id"], "Economic decline.")
    carol_answer = await post_answer(carol, q["id"], "Overextension.")

    comment = await client.post(
        "/api/comments",
        json={"parentType": "answer", "parentId": bob_answer["id"], "content": "Source?"},
        headers=carol["headers"],
    )
    assert comment.status_code == 201

    await client.post(f"/api/answers/{bob_answer['id']}/upvote", headers=alice["headers"])
    await client.post(f"/api/answers/{bob_answer['id']}/select", headers=alice["headers"])

    detail = (await client.get(f"/api/questions/{q['id']}")).json()
    assert detail["status"] == "answered"
    assert [a["id"] for a in detail["answers"]] == [bob_answer["id"], carol_answer["id"]]

    await client.post(f"/api/answers/{carol_answer['id']}/select", headers=alice["headers"])
    detail = (await client.get(f"/api/questions/{q['id']}")).json()
    assert detail["status"] == "answered"
    assert [(a["id"], a["is_selected"]) for a in detail["answers"]] == [
        (carol_answer["id"], True), (bob_answer["id"], False),
    ]

    theme_view = (await client.get("/api/themes")).json()
    assert theme_view[0]["question_count"] == 1
    listing = (await client.get("/api/questions", params={"theme_id": theme["id"]})).json()
    assert listing[0]["answer_count"] == 2


async def test_two_answers_one_author_selection_and_foreign_select(
    client, alice, bob, post_question, post_answer,
):
    """A asks under History; B answers twice; A picks R2; B can't pick R1."""
    theme = (await client.post(
        "/api/themes", json={"title": "History"}, headers=alice["headers"],
    )).json()
    q = await post_question(alice, themeId=theme["id"])
    r1 = await post_answer(bob, q["id"], "R1")
    r2 = await post_answer(bob, q["id"], "R2")

    res = await client.post(f"/api/answers/{r2['id']}/select", headers=alice["headers"])
    assert res.status_code == 200

    forbidden = await client.post(
        f"/api/answers/{r1['id']}/select", headers=bob["headers"],
    )
    assert forbidden.status_code == 403

    anonymous = await client.get(f"/api/questions/{q['id']}")
    assert anonymous.status_code == 200
    body = anonymous.json()
    assert body["status"] == "answered"
    assert [(a["id"], a["is_selected"]) for a in body["answers"]] == [
        (r2["id"], True), (r1["id"], False),
    ]
