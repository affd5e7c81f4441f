from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fravia.mcp.app import app

pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_healthz(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}


def test_index_and_menu(client: TestClient) -> None:
    index = client.get("/fravia/index").json()
    assert [entry["id"] for entry in index] == [f"S{n}" for n in range(1, 9)]

    menu = client.get("/fravia/menu/1").json()
    assert menu["name"] == "Reconnaissance"
    assert [block["code"] for block in menu["building_blocks"]] == ["A", "B", "C"]


def test_menu_out_of_range_is_400(client: TestClient) -> None:
    response = client.get("/fravia/menu/0")
    assert response.status_code == 400
    assert response.json()["detail"] == "Phase must be 1-8"


def test_execute(client: TestClient) -> None:
    response = client.post("/fravia/execute", json={"phase": 1, "topics": ["x"], "codes": "X"})
    assert response.status_code == 200
    body = response.json()
    assert {q["block_code"] for q in body["queries"]} == {"A", "B"}
    assert len(body["results"]) == len(body["queries"])


def test_execute_validation_errors(client: TestClient) -> None:
    assert client.post("/fravia/execute", json={"phase": 1, "topics": [], "codes": "A"}).status_code == 422
    assert client.post("/fravia/execute", json={"phase": 1, "topics": ["x"], "codes": " "}).status_code == 422


def test_hygiene_and_engines(client: TestClient) -> None:
    body = client.post("/fravia/hygiene", json={"codes": "sftucla", "engine": "ddg"}).json()
    assert body == {"engine": "ddg", "dialect": "ddg", "clause": ""}
    engines = client.get("/fravia/engines").json()
    assert {"id": "scholar", "name": "Google Scholar", "type": "browser"} in engines


def test_stop(client: TestClient) -> None:
    body = client.post("/fravia/stop", json={"continue_to_phase": 2, "reason": ""}).json()
    assert body["continue_to_phase"] == 2
    assert body["text"].startswith("STOP: Phase 1 complete.")
