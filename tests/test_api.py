import pytest

import api_server
from giftradar.context import AppContext
from giftradar.core import default_config


@pytest.fixture
def client(monkeypatch, sample_documents):
    monkeypatch.setitem(api_server._cache, "ctx", AppContext(default_config()))
    monkeypatch.setitem(api_server._cache, "documents", sample_documents)
    api_server.app.config["TESTING"] = True
    with api_server.app.test_client() as client:
        yield client


def test_documents_default_sort(client):
    response = client.get("/documents")
    data = response.get_json()

    assert response.status_code == 200
    assert data["status"] == "success"
    assert data["total"] == 4
    assert [d["id"] for d in data["documents"]] == ["a1", "a2", "a3", "a4"]
    assert "score" not in data["documents"][0]


def test_documents_keyword_relevance(client):
    response = client.get("/documents?keywords=eco-friendly&sort=by-relevance-descending")
    data = response.get_json()

    assert response.status_code == 200
    assert [d["id"] for d in data["documents"]] == ["a4", "a1"]
    assert [d["score"] for d in data["documents"]] == [5, 0]


def test_documents_search_and_limit(client):
    data = client.get("/documents?q=gifts&sort=title&limit=1").get_json()

    assert data["total"] == 2
    assert data["count"] == 1
    assert data["documents"][0]["id"] == "a2"


@pytest.mark.parametrize("query", [
    "/documents?sort=popularity",
    "/documents?limit=abc",
    "/documents?limit=-1",
    "/documents?date_range=yesterday",
])
def test_documents_invalid_parameters(client, query):
    response = client.get(query)
    data = response.get_json()

    assert response.status_code == 400
    assert data["status"] == "error"
    assert data["error"]["code"] == "INVALID_PARAMETER"


def test_missing_data_file(monkeypatch, tmp_path):
    config = default_config()
    config["DATA_PATH"] = str(tmp_path / "missing.json")
    monkeypatch.setitem(api_server._cache, "ctx", AppContext(config))
    monkeypatch.setitem(api_server._cache, "documents", None)

    response = api_server.app.test_client().get("/stats")

    assert response.status_code == 404
    assert response.get_json()["error"]["code"] == "DATA_NOT_FOUND"


def test_categories(client):
    data = client.get("/categories?limit=1").get_json()

    assert data["status"] == "success"
    assert len(data["categories"]) == 6
    sustainable = data["categories"][0]
    assert sustainable["name"] == "Sustainable & Eco-Friendly"
    assert sustainable["article_count"] == 2
    assert sustainable["total_count"] == 4
    assert sustainable["trend_score"] == 100
    assert sustainable["popularity"] == "High"
    assert [a["id"] for a in sustainable["articles"]] == ["a1"]


def test_stats(client):
    data = client.get("/stats").get_json()

    assert data["status"] == "success"
    assert data["summary"]["total"] == 4
    assert data["summary"]["latest"].startswith("2025-03-12")
    assert [t["month"] for t in data["timeline"]] == ["2024-12", "2025-02", "2025-03"]


def test_health(client):
    data = client.get("/health").get_json()

    assert data["status"] == "online"
    assert data["version"] == api_server.__version__


def test_stats_counts_sources(client):
    data = client.get("/stats").get_json()

    assert data["sources"][0] == {"source": "Sustainable Gifts Hub", "count": 1}
    assert len(data["sources"]) == 4


def test_filter_options(client):
    data = client.get("/filters").get_json()

    assert data["status"] == "success"
    assert data["sources"][1] == "Tech Gifting Review"
    assert data["date_ranges"] == ["all", "2025", "2024", "last30", "last90", "last180"]
    assert "wellness" in data["keywords"]
