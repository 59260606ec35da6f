import pytest
from smartedit.engine import Engine
from smartedit_web.web import app as flask_app

@pytest.mark.e2e
def test_frontend_home_page_renders():
    eng = Engine(); eng.build()

    import smartedit_web.web as webmod
    webmod._engine = eng

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<textarea" in html
    assert "/api/edit" in html

    eng.shutdown()
