import pytest
from smartedit.engine import Engine
from smartedit_web.web import app as flask_app

@pytest.fixture
def client():
    eng = Engine(); eng.build()

    import smartedit_web.web as webmod
    webmod._engine = eng

    yield flask_app.test_client()
    eng.shutdown()
    webmod._engine = None

@pytest.mark.e2e
def test_health(client):
    rv = client.get("/api/health")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["ok"] is True
    assert data["words"] >= 10 and data["nodes"] > data["words"]

@pytest.mark.e2e
def test_suggest(client):
    rv = client.get("/api/suggest?q=app&k=3")
    assert rv.status_code == 200
    assert rv.get_json() == ["appetite", "apple", "application"]
    assert client.get("/api/suggest").get_json() == []

@pytest.mark.e2e
def test_suggest_negative_limit_is_bad_request(client):
    rv = client.get("/api/suggest?q=app&k=-1")
    assert rv.status_code == 400
    assert "error" in rv.get_json()

@pytest.mark.e2e
def test_correct(client):
    data = client.get("/api/correct?w=recieve").get_json()
    assert data == {"word": "recieve", "corrected": "receive", "changed": True}
    data = client.get("/api/correct?w=xyzxyz&d=2").get_json()
    assert data["changed"] is False

@pytest.mark.e2e
def test_search(client):
    rv = client.post("/api/search", json={"text": "banana bandana band", "pattern": "ban"})
    assert rv.get_json() == {"matches": [0, 7, 15], "count": 3}
    rv = client.post("/api/search", json={"text": "banana", "pattern": "  "})
    assert rv.get_json() == {"matches": [], "count": 0}

@pytest.mark.e2e
def test_search_rejects_bad_body(client):
    assert client.post("/api/search", data="not json").status_code == 400
    assert client.post("/api/search", json={"text": 5, "pattern": "a"}).status_code == 400

@pytest.mark.e2e
def test_highlight(client):
    rv = client.post("/api/highlight", json={"text": "<b>ban</b>", "pattern": "ban"})
    data = rv.get_json()
    assert data["count"] == 1
    assert data["html"] == '&lt;b&gt;<mark class="match">ban</mark>&lt;/b&gt;'

@pytest.mark.e2e
def test_edit_type_autocorrects_and_matches(client):
    rv = client.post("/api/edit", json={"text": "I will recieve", "pattern": "ei"})
    data = rv.get_json()
    assert data["text"] == "I will receive"
    assert data["corrected"] is True
    assert data["matches"] == [10]
    assert data["current"] == 0
    assert '<mark class="match current">ei</mark>' in data["html"]

@pytest.mark.e2e
def test_edit_search_does_not_autocorrect(client):
    data = client.post("/api/edit", json={
        "text": "I will recieve", "pattern": "ie", "action": "search",
    }).get_json()
    assert data["text"] == "I will recieve"
    assert data["matches"] == [10]

@pytest.mark.e2e
def test_edit_navigation(client):
    body = {"text": "banana bandana band", "pattern": "ban", "action": "next", "current": 0}
    assert client.post("/api/edit", json=body).get_json()["current"] == 1
    body.update(action="prev", current=0)
    assert client.post("/api/edit", json=body).get_json()["current"] == 2

@pytest.mark.e2e
def test_edit_accept(client):
    data = client.post("/api/edit", json={
        "text": "I like appl", "pattern": "", "action": "accept", "word": "application",
    }).get_json()
    assert data["text"] == "I like application "
    assert data["suggestions"] == []
    assert data["current"] == -1

@pytest.mark.e2e
def test_edit_unknown_action(client):
    rv = client.post("/api/edit", json={"text": "x", "pattern": "", "action": "explode"})
    assert rv.status_code == 400

@pytest.mark.e2e
def test_edit_navigation_from_no_selection(client):
    body = {"text": "banana bandana band", "pattern": "ban", "action": "next", "current": -1}
    assert client.post("/api/edit", json=body).get_json()["current"] == 0
    body.update(action="prev")
    assert client.post("/api/edit", json=body).get_json()["current"] == 2
