import pytest
from apps.web.app import USAGE, create_app

WORDS = ["ябеда", "ягода", "ямщик", "дверь", "crane", "pluck"]


@pytest.fixture
def client():
    app = create_app(words=WORDS)
    app.testing = True
    return app.test_client()


def test_root_usage(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == USAGE


def test_guess_word(client):
    resp = client.post("/guess-word", json=["=я^м^н=д=а"])
    assert resp.status_code == 200
    assert resp.get_json() == [["ябеда", "ягода"]]
    assert "ябеда" in resp.get_data(as_text=True)


def test_guess_word_empty_list_suggests(client):
    resp = client.post("/guess-word", json=[])
    assert resp.status_code == 200
    (found,) = resp.get_json()
    assert found and set(found) <= set(WORDS)


def test_guess_word_format_error(client):
    resp = client.post("/guess-word", json=["=ямн=д=а"])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "format"


def test_guess_word_validation_error(client):
    resp = client.post("/guess-word", json=["=я^м^н=д=а", "^я^б^е^д^а"])
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "validation"
    assert len(body["messages"]) == 3


@pytest.mark.parametrize("payload", [{"a": 1}, "=я^м^н=д=а", [1, 2]])
def test_guess_word_bad_body(client, payload):
    resp = client.post("/guess-word", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "bad_request"


def test_injected_words_are_normalized():
    app = create_app(words=[" Ябеда", "ЯГОДА", "ягода", "crane!", "cranes"])
    assert app.config["WORDS"] == ("ябеда", "ягода")
    resp = app.test_client().post("/guess-word", json=["=я^м^н=д=а"])
    assert resp.get_json() == [["ябеда", "ягода"]]


def test_curated_starter_without_fitting_set(monkeypatch):
    monkeypatch.setenv("GUESSGAME_STARTER", "curated")
    app = create_app(words=["crane", "pluck"])
    resp = app.test_client().post("/guess-word", json=[])
    assert resp.status_code == 503
    body = resp.get_json()
    assert body["error"] == "starter"
    assert "No curated starter set" in body["messages"][0]
