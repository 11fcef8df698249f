import pytest
from fastapi.testclient import TestClient
from api.main import app

@pytest.fixture
def client():
    return TestClient(app)

def test_health(client):
    assert client.get("/health").json() == {"ok": True}

def test_notations(client):
    data = client.get("/notations").json()
    assert data["notations"] == ["Infix", "Prefix", "Postfix"]
    assert {"source": "Infix", "target": "Prefix"} in data["conversions"]
    assert len(data["conversions"]) == 6

def test_convert_trims_and_returns_trace(client):
    r = client.post("/convert", json={"source": "Infix", "target": "Postfix", "expression": "  A ^ B ^ C  "})
    assert r.status_code == 200
    out = r.json()
    assert out["ok"] is True
    assert out["expression"] == "A ^ B ^ C"
    assert out["result"] == "A B C ^ ^"
    assert out["steps"][0] == {
        "sequence_index": 1, "remaining_input": "^ B ^ C", "stack_snapshot": "",
        "output_so_far": "A", "action": "append operand A",
    }
    assert out["steps"][-1]["action"] == "pop remaining operators"

def test_convert_invalid_character_reported_in_payload(client):
    r = client.post("/convert", json={"source": "Infix", "target": "Prefix", "expression": "A # B"})
    assert r.status_code == 200
    out = r.json()
    assert out["ok"] is False
    assert out["error"] == "Invalid character: #"
    assert out["error_kind"] == "invalid_character"
    assert out["steps"] == []

def test_unknown_notation_rejected_by_validation(client):
    r = client.post("/convert", json={"source": "Infix", "target": "Polish", "expression": "A"})
    assert r.status_code == 422

def test_markdown_endpoint(client):
    r = client.post("/convert/markdown", json={"source": "Prefix", "target": "Infix", "expression": "+ A B"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/markdown")
    assert r.text.splitlines()[-1] == "| 4 |  | - | A + B | finalize |"

def test_markdown_endpoint_error(client):
    r = client.post("/convert/markdown", json={"source": "Prefix", "target": "Infix", "expression": "+ A @"})
    assert r.status_code == 400
    assert r.json()["detail"]["error_kind"] == "invalid_character"
