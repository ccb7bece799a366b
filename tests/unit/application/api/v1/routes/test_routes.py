"""API tests for the /api routes, with the upstream fetcher replaced."""

from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from brainapi.application.api.rest.app import create_app
from brainapi.application.di import create_container
from brainapi.config import Config
from brainapi.domain.dataset.port.hits_fetcher import HitsFetcher
from brainapi.domain.shared.error import UpstreamUnavailableError

EXAMPLE_PAYLOAD = {
    "hits": [
        {"country": "Ukraine", "category": "Imports", "name": "A", "score": 1},
        {"country": "Ukraine", "category": "Imports", "name": "A"},
        {"country": "Poland", "category": "Exports", "name": "B"},
        {"country": None, "category": None, "name": "C"},
    ]
}


class FakeFetcherProvider(Provider):
    def __init__(self, fetcher: AsyncMock) -> None:
        super().__init__()
        self._fetcher = fetcher

    @provide(scope=Scope.APP)
    def get_fetcher(self) -> HitsFetcher:
        return self._fetcher


def _make_client(fetcher: AsyncMock) -> TestClient:
    config = Config()
    app = create_app(config, create_container(config, FakeFetcherProvider(fetcher)))
    return TestClient(app)


@pytest.fixture
def fetcher() -> AsyncMock:
    mock = AsyncMock()
    mock.fetch_json.return_value = EXAMPLE_PAYLOAD
    return mock


@pytest.fixture
def client(fetcher: AsyncMock) -> Iterator[TestClient]:
    with _make_client(fetcher) as test_client:
        yield test_client


@pytest.fixture
def failing_client() -> Iterator[TestClient]:
    mock = AsyncMock()
    mock.fetch_json.side_effect = UpstreamUnavailableError("Request error: connection refused")
    with _make_client(mock) as test_client:
        yield test_client


class TestStartup:
    def test_loads_once_at_startup(self, client: TestClient, fetcher: AsyncMock):
        fetcher.fetch_json.assert_called_once()
        body = client.get("/api/status").json()
        assert body["data_loaded"] is True
        assert body["total"] == 4
        assert isinstance(body["last_updated"], str)

    def test_failed_startup_still_serves(self, failing_client: TestClient):
        response = failing_client.get("/api/status")
        assert response.status_code == 200
        body = response.json()
        assert body["data_loaded"] is False
        assert body["total"] == 0


class TestDatasetRoutes:
    def test_raw(self, client: TestClient):
        rows = client.get("/api/raw").json()
        assert len(rows) == 4
        assert rows[0] == {
            "country": "Ukraine",
            "category": "Imports",
            "currency": None,
            "name": "A",
            "type": None,
        }

    def test_pie(self, client: TestClient):
        assert client.get("/api/pie").json() == [
            {"label": "Imports", "count": 2},
            {"label": "Exports", "count": 1},
        ]

    def test_search_counts_by_country(self, client: TestClient):
        assert client.get("/api/search").json() == [
            {"label": "Ukraine", "count": 2},
            {"label": "Poland", "count": 1},
        ]

    def test_imports_by_country(self, client: TestClient):
        assert client.get("/api/imports/by-country").json() == [
            {"label": "Ukraine", "count": 2},
        ]

    def test_import_names(self, client: TestClient):
        assert client.get("/api/import-names").json() == ["A"]

    def test_export_names(self, client: TestClient):
        assert client.get("/api/export-names").json() == ["B"]

    @pytest.mark.parametrize(
        "path",
        [
            "/api/raw",
            "/api/pie",
            "/api/search",
            "/api/imports/by-country",
            "/api/import-names",
            "/api/export-names",
        ],
    )
    def test_not_loaded_is_error_body(self, failing_client: TestClient, path: str):
        response = failing_client.get(path)
        assert response.status_code == 200
        assert response.json() == {"error": "Data not loaded yet"}


class TestRefreshRoute:
    def test_success(self, client: TestClient, fetcher: AsyncMock):
        fetcher.fetch_json.return_value = {"hits": [{"category": "Exports", "name": "Z"}]}

        body = client.get("/api/refresh").json()

        assert body["ok"] is True
        assert body["total"] == 1
        assert "error" not in body
        assert client.get("/api/export-names").json() == ["Z"]
        assert client.get("/api/status").json()["last_updated"] == body["last_updated"]

    def test_failure_keeps_previous_data(self, client: TestClient, fetcher: AsyncMock):
        fetcher.fetch_json.side_effect = UpstreamUnavailableError("Request error: timed out")

        response = client.get("/api/refresh")

        assert response.status_code == 200
        assert response.json() == {"ok": False, "error": "Request error: timed out"}
        assert len(client.get("/api/raw").json()) == 4

    def test_recovers_after_failed_startup(self):
        mock = AsyncMock()
        mock.fetch_json.side_effect = UpstreamUnavailableError("down")
        with _make_client(mock) as test_client:
            mock.fetch_json.side_effect = None
            mock.fetch_json.return_value = EXAMPLE_PAYLOAD

            assert test_client.get("/api/refresh").json()["ok"] is True
            assert test_client.get("/api/status").json()["data_loaded"] is True


class TestInUseRoute:
    def test_marks_in_use(self, client: TestClient):
        body = client.post("/api/in-use").json()
        assert body["status"]["in_use"] is True
        assert body["status"]["ready"] is True

    def test_clears_in_use(self, client: TestClient):
        client.post("/api/in-use")
        body = client.post("/api/in-use", json={"in_use": False}).json()
        assert body["status"]["in_use"] is False


class TestHealth:
    def test_health(self, client: TestClient):
        assert client.get("/api/health").json() == {"status": "healthy", "version": "0.1.0"}
