"""
Response-shape and header differences between v1 and v2.
"""


def _seed(store, count):
    return [store.add(f"word{i:02d}", num_letters=6) for i in range(count)]


def test_v1_lists_flat_array_newest_first(client, store):
    seeded = _seed(store, 3)

    response = client.get("/api/v1/words")

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body, list)
    assert [w["id"] for w in body] == [w["id"] for w in reversed(seeded)]
    assert response.headers["cache-control"] == "public, max-age=300, s-maxage=300"


def test_v1_list_ignores_pagination_params(client, store):
    _seed(store, 12)

    body = client.get("/api/v1/words", params={"limit": "5"}).json()

    assert len(body) == 12


def test_v1_list_applies_filters(client, store):
    store.add("ox", num_letters=2)
    store.add("cat", num_letters=3)
    store.add("monkey", num_letters=6)
    store.add("giraffe", num_letters=7)

    body = client.get("/api/v1/words", params={"minLetters": "3", "maxLetters": "6"}).json()

    assert sorted(w["word"] for w in body) == ["cat", "monkey"]


def test_v2_lists_with_pagination_envelope(client, store):
    _seed(store, 25)

    last_page = client.get("/api/v2/words", params={"limit": "10", "offset": "20"}).json()
    middle_page = client.get("/api/v2/words", params={"limit": "10", "offset": "10"}).json()

    assert len(last_page["words"]) == 5
    assert last_page["pagination"] == {"total": 25, "limit": 10, "offset": 20, "hasMore": False}
    assert middle_page["pagination"]["hasMore"] is True


def test_v2_list_defaults_and_tolerates_bad_params(client, store):
    _seed(store, 12)

    body = client.get("/api/v2/words", params={"limit": "abc", "minLetters": "lots"}).json()

    assert len(body["words"]) == 10
    assert body["pagination"] == {"total": 12, "limit": 10, "offset": 0, "hasMore": True}


def test_v2_adds_cors_headers_to_every_response(client, store):
    ok = client.get("/api/v2/words")
    missing = client.get("/api/v2/words/not-an-id")

    assert ok.headers["access-control-allow-origin"] == "*"
    assert "PUT" in ok.headers["access-control-allow-methods"]
    assert missing.status_code == 404
    assert missing.headers["access-control-allow-origin"] == "*"


def test_v2_answers_preflight(client):
    response = client.options("/api/v2/words/search")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_v1_cors_comes_from_global_middleware(client, store):
    without_origin = client.get("/api/v1/categories")
    with_origin = client.get("/api/v1/categories", headers={"Origin": "https://example.com"})

    assert "access-control-allow-origin" not in without_origin.headers
    assert with_origin.headers["access-control-allow-origin"] == "*"


def test_security_headers_and_health(client):
    response = client.get("/health")

    assert response.json() == {"status": "ok"}
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"


def test_security_headers_include_content_security_policy(client, store):
    response = client.get("/api/v1/words")

    csp = response.headers["content-security-policy"]
    assert csp.startswith("default-src 'self';")
    assert "frame-ancestors 'none';" in csp


def test_v2_list_ignores_filter_values_beyond_int32(client, store):
    _seed(store, 3)

    response = client.get("/api/v2/words", params={"minLetters": "9999999999"})

    assert response.status_code == 200
    assert response.json()["pagination"]["total"] == 3


def test_v1_search_applies_game_type_preset(client, store):
    store.add("ox")
    store.add("oxen")
    store.add("foxhound")

    response = client.get("/api/v1/words/search", params={"q": "ox", "type": "scrabble"})

    body = response.json()
    assert response.status_code == 200
    assert [w["word"] for w in body["words"]] == ["ox", "oxen"]
    assert body["type"] == "scrabble"
    assert body["query"] == "ox"


def test_v1_search_unknown_type_is_echoed_without_constraint(client, store):
    store.add("ox")
    store.add("foxhound")

    body = client.get("/api/v1/words/search", params={"q": "ox", "type": "boggle"}).json()

    assert [w["word"] for w in body["words"]] == ["foxhound", "ox"]
    assert body["type"] == "boggle"


def test_v1_search_type_defaults_to_null(client, store):
    store.add("ox")

    assert client.get("/api/v1/words/search", params={"q": "ox"}).json()["type"] is None


def test_v2_search_has_no_game_type(client, store):
    store.add("ox")
    store.add("foxhound")

    body = client.get("/api/v2/words/search", params={"q": "ox", "type": "scrabble"}).json()

    assert "type" not in body
    assert len(body["words"]) == 2
