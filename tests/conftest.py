import uuid

import pytest


@pytest.fixture()
def db_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'ledger.db'}"
    monkeypatch.setenv("LEDGER_DB_URL", url)
    return url


@pytest.fixture()
def engine(db_url):
    from ledger_api.db.engine import get_engine
    from ledger_api.db.schema import metadata

    engine = get_engine()
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def client(engine):
    from fastapi.testclient import TestClient

    from ledger_api.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def user_id():
    return str(uuid.uuid4())


@pytest.fixture()
def headers(user_id):
    return {"X-User-Id": user_id}


@pytest.fixture()
def other_headers():
    return {"X-User-Id": str(uuid.uuid4())}


@pytest.fixture()
def make_customer(client, headers):
    def _make(as_headers=None, **overrides):
        payload = {
            "page_no": 12,
            "first_name": "Ramesh",
            "last_name": "Patil",
            "village_name": "Shirur",
        }
        payload.update(overrides)
        resp = client.post("/customers/", json=payload, headers=as_headers or headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
