from __future__ import annotations

BODY = {
    "cuisine": "Japanese",
    "cookingTime": "45 minutes",
    "mealType": "lunch",
    "dietType": "pescatarian",
}


def test_no_secret_configured_allows_requests(make_client):
    c = make_client(api_key="")
    resp = c.post("/recommend-dish", json=BODY)
    assert resp.status_code == 200


def test_missing_header_is_unauthorized(make_client, fake_llm):
    c = make_client(api_key="s3cret")
    resp = c.post("/recommend-dish", json=BODY)
    assert resp.status_code == 401
    assert fake_llm.calls == []


def test_wrong_key_is_forbidden(make_client, fake_llm):
    c = make_client(api_key="s3cret")
    resp = c.post("/recommend-dish", json=BODY, headers={"x-api-key": "guess"})
    assert resp.status_code == 403
    assert fake_llm.calls == []


def test_matching_key_is_accepted(make_client):
    # The header matching the configured secret is the success case.
    c = make_client(api_key="s3cret")
    resp = c.post("/recommend-dish", json=BODY, headers={"x-api-key": "s3cret"})
    assert resp.status_code == 200


def test_recipe_requires_key(make_client):
    c = make_client(api_key="s3cret")
    assert c.post("/recipe", json={"dishName": "Ramen"}).status_code == 401


def test_legacy_endpoint_requires_key(make_client):
    c = make_client(api_key="s3cret")
    resp = c.post(
        "/",
        json={"cuisine": "Thai", "cookingTime": "15 minutes", "mealType": "lunch"},
        headers={"x-api-key": "nope"},
    )
    assert resp.status_code == 403


def test_health_is_public(make_client):
    c = make_client(api_key="s3cret")
    assert c.get("/health").status_code == 200
