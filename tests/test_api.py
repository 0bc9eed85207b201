import pytest
from fastapi.testclient import TestClient

import api.index as index
from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    assert client.get("/").json() == {"message": "Molding Cut Calculator API"}
    assert client.get("/api").json() == {"message": "Molding Cut Calculator API"}


def test_solve_reference_pieces(client):
    resp = client.post("/api/solve", json={"stock_length": 2200, "pieces": {"2110": 4, "940": 1, "850": 1}})
    assert resp.status_code == 200
    body = resp.json()
    assert body["bars_needed"] == 5
    assert body["bar_plans"][4] == {"bar_number": 5, "cuts": [940, 850], "used_mm": 1790, "waste_mm": 410}
    assert body["total_waste"] == 4 * 90 + 410
    assert body["efficiency_percent"] == round(10230 / 11000 * 100, 1)


def test_solve_splits_pieces_longer_than_stock():
    result = index.solve_cutting_stock(1000, {2500: 1})
    assert [p.cuts for p in result.bar_plans] == [[1000], [1000], [500]]
    assert result.total_waste == 500


def test_solve_uses_default_stock_length(client):
    resp = client.post("/api/solve", json={"pieces": {"2200": 2}})
    assert resp.status_code == 200
    assert resp.json()["bars_needed"] == 2
    assert resp.json()["total_waste"] == 0


@pytest.mark.parametrize("payload", [
    {"pieces": {}},
    {"pieces": {"-5": 1}},
    {"pieces": {"100": 0}},
    {"stock_length": 0, "pieces": {"100": 1}},
])
def test_solve_rejects_bad_requests(client, payload):
    assert client.post("/api/solve", json=payload).status_code == 422


def test_solve_maps_value_error_to_400(client, monkeypatch):
    def boom(stock_length, pieces):
        raise ValueError("bad length")

    monkeypatch.setattr(index, "solve_cutting_stock", boom)
    resp = client.post("/api/solve", json={"pieces": {"100": 1}})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "bad length"


def test_solve_maps_other_errors_to_500(client, monkeypatch):
    def boom(stock_length, pieces):
        raise RuntimeError("kaput")

    monkeypatch.setattr(index, "solve_cutting_stock", boom)
    resp = client.post("/api/solve", json={"pieces": {"100": 1}})
    assert resp.status_code == 500


def test_solve_rejects_request_needing_too_many_moldings(client):
    resp = client.post("/api/solve", json={"stock_length": 1, "pieces": {"2000000": 1}})
    assert resp.status_code == 422


def test_bar_limit_counts_split_pieces(client, monkeypatch):
    monkeypatch.setattr(index, "MAX_BARS", 3)
    ok = client.post("/api/solve", json={"stock_length": 1000, "pieces": {"2500": 1}})
    assert ok.status_code == 200
    assert ok.json()["bars_needed"] == 3
    too_many = client.post("/api/solve", json={"stock_length": 1000, "pieces": {"2500": 1, "100": 1}})
    assert too_many.status_code == 422


def test_dev_server_serves_the_api_app():
    import main

    assert main.app is index.app
