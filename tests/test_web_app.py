import pytest
import app as app_module

@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c

def test_get_prime(client):
    r = client.get("/api/isprime?n=2147483647")
    assert r.status_code == 200
    body = r.get_json()
    assert body["ok"] is True
    assert body["n"] == "2147483647"
    assert body["verdict"] == "PRIME"
    assert body["is_prime"] is True
    assert body["deterministic"] is True
    assert "X-Compute-ms" in r.headers

def test_get_composite_and_negative(client):
    assert client.get("/api/isprime?n=3215031751").get_json()["verdict"] == "COMPOSITE"
    assert client.get("/api/isprime?n=-5").get_json()["verdict"] == "COMPOSITE"

@pytest.mark.parametrize("query,message", [
    ("", "missing n"),
    ("?n=", "missing n"),
    ("?n=abc", "n must be integer"),
    (f"?n={2**64}", "64-bit"),
])
def test_get_bad_request(client, query, message):
    r = client.get("/api/isprime" + query)
    assert r.status_code == 400
    body = r.get_json()
    assert body["ok"] is False
    assert message in body["error"]

def test_post_json(client):
    assert client.post("/api/isprime", json={"n": 561}).get_json()["verdict"] == "COMPOSITE"
    assert client.post("/api/isprime", json={"n": "7919"}).get_json()["verdict"] == "PRIME"

def test_post_invalid_payload(client):
    r = client.post("/api/isprime", data="not json", content_type="application/json")
    assert r.status_code == 400
    assert client.post("/api/isprime", json=[1, 2]).status_code == 400

def test_batch(client):
    r = client.post("/api/isprime/batch", json={"ns": [2, 4, 17, "97"]})
    assert r.status_code == 200
    results = r.get_json()["results"]
    assert [x["verdict"] for x in results] == ["PRIME", "COMPOSITE", "PRIME", "PRIME"]

def test_batch_rejects_non_list(client):
    assert client.post("/api/isprime/batch", json={"ns": 17}).status_code == 400
    assert client.post("/api/isprime/batch", json={}).status_code == 400

def test_batch_rejects_bad_member(client):
    r = client.post("/api/isprime/batch", json={"ns": [3, "x"]})
    assert r.status_code == 400

def test_batch_cap(client, monkeypatch):
    monkeypatch.setattr(app_module, "MAX_BATCH", 2)
    r = client.post("/api/isprime/batch", json={"ns": [2, 3, 5]})
    assert r.status_code == 400
    assert "cap is 2" in r.get_json()["error"]

def test_health(client):
    body = client.get("/api/health").get_json()
    assert body["ok"] is True
    assert body["bases"] == [2, 3, 5, 7, 11, 13, 17]
    assert body["deterministic_limit"] == 341550071728321
