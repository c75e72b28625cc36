def test_anonymous_cannot_review(client, seeded):
    r = client.post("/schools/a/reviews", json={"reviewer_name": "Mia", "rating": 4})
    assert r.status_code == 401


def test_signed_in_user_can_review(client, seeded, user_headers):
    r = client.post(
        "/schools/a/reviews",
        json={"reviewer_name": "Mia", "rating": 4, "comment": "Great teachers"},
        headers=user_headers,
    )
    assert r.status_code == 201
    assert r.json() == {"reviewer_name": "Mia", "rating": 4, "comment": "Great teachers", "school_id": "a"}


def test_rating_must_be_between_1_and_5(client, seeded, user_headers):
    for rating in (0, 6):
        r = client.post("/schools/a/reviews", json={"reviewer_name": "Mia", "rating": rating}, headers=user_headers)
        assert r.status_code == 422


def test_review_for_missing_school(client, user_headers):
    r = client.post("/schools/nope/reviews", json={"reviewer_name": "Mia", "rating": 3}, headers=user_headers)
    assert r.status_code == 404


def test_delete_review_by_position(client, seeded, user_headers, admin_headers):
    for name in ("first", "second", "third"):
        client.post("/schools/a/reviews", json={"reviewer_name": name, "rating": 5}, headers=user_headers)

    assert client.delete("/schools/a/reviews/1", headers=user_headers).status_code == 403
    assert client.delete("/schools/a/reviews/1", headers=admin_headers).status_code == 204

    names = [r["reviewer_name"] for r in client.get("/schools/a/reviews").json()]
    assert names == ["first", "third"]

    assert client.delete("/schools/a/reviews/5", headers=admin_headers).status_code == 404
