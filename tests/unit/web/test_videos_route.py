"""
Tests de la route GET /videos et de la mise en forme des erreurs.

Le container est surcharge (store et fournisseur mockes) : aucun acces
reseau ni base reelle.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from vidcatalog.adapters.api.youtube_client import YouTubeClient
from vidcatalog.core.errors import (
    ProviderRejectedError,
    ProviderUnreachableError,
    StoreUnavailableError,
)
from vidcatalog.web.app import create_app
from tests.fixtures.youtube_responses import YOUTUBE_BAD_KEY_ERROR, make_video_item


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as client:
        yield client


class TestVideosSuccess:
    """Reponses 200."""

    def test_returns_records(self, client, mock_store: MagicMock, mock_provider: AsyncMock):
        """Scenario: store ["a1","a2"], les deux resolus -> 200 et tableau JSON."""
        records = [make_video_item("a1", "First"), make_video_item("a2", "Second")]
        mock_store.list_ids.return_value = ["a1", "a2"]
        mock_provider.resolve.return_value = records

        response = client.get("/videos")

        assert response.status_code == 200
        assert response.json() == records

    def test_partial_resolution(self, client, mock_store, mock_provider):
        """Scenario: store ["a1","bad"], seul a1 resolu -> 200."""
        mock_store.list_ids.return_value = ["a1", "bad"]
        mock_provider.resolve.return_value = [make_video_item("a1", "First")]

        response = client.get("/videos")

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == ["a1"]

    def test_consecutive_calls_identical(self, client, mock_store, mock_provider):
        mock_store.list_ids.return_value = ["a1"]
        mock_provider.resolve.return_value = [make_video_item("a1", "First")]

        assert client.get("/videos").json() == client.get("/videos").json()

    def test_cors_header(self, client, mock_store, mock_provider):
        mock_store.list_ids.return_value = ["a1"]
        mock_provider.resolve.return_value = [make_video_item("a1", "First")]

        response = client.get("/videos", headers={"Origin": "http://localhost:3000"})

        assert response.headers["access-control-allow-origin"] == "*"


class TestVideosErrors:
    """Correspondance erreur -> statut HTTP et corps JSON."""

    def test_empty_store_is_404(self, client, mock_store, mock_provider):
        """Scenario: store [] -> 404 {error: "no identifiers on record"}."""
        mock_store.list_ids.return_value = []

        response = client.get("/videos")

        assert response.status_code == 404
        assert response.json() == {"error": "no identifiers on record"}
        mock_provider.resolve.assert_not_awaited()

    def test_provider_empty_is_404(self, client, mock_store, mock_provider):
        mock_store.list_ids.return_value = ["bad"]
        mock_provider.resolve.return_value = []

        response = client.get("/videos")

        assert response.status_code == 404
        assert response.json() == {"error": "no videos found from provider"}

    def test_provider_timeout_is_503(self, client, mock_store, mock_provider):
        """Scenario: store ["a1"], timeout -> 503 {error: "no response from provider"}."""
        mock_store.list_ids.return_value = ["a1"]
        mock_provider.resolve.side_effect = ProviderUnreachableError(details="ReadTimeout")

        response = client.get("/videos")

        assert response.status_code == 503
        assert response.json() == {"error": "no response from provider"}

    def test_provider_rejected_is_502_with_details(self, client, mock_store, mock_provider):
        mock_store.list_ids.return_value = ["a1"]
        mock_provider.resolve.side_effect = ProviderRejectedError(400, YOUTUBE_BAD_KEY_ERROR)

        response = client.get("/videos")

        assert response.status_code == 502
        assert response.json() == {"error": "provider error", "details": YOUTUBE_BAD_KEY_ERROR}

    def test_internal_error_is_500(self, client, mock_store, mock_provider):
        mock_store.list_ids.return_value = ["a1"]
        mock_provider.resolve.side_effect = ValueError("bad payload")

        response = client.get("/videos")

        assert response.status_code == 500
        assert response.json() == {"error": "server error", "details": "bad payload"}

    def test_batch_too_large_is_500(self, client, mock_store, mock_provider):
        mock_store.list_ids.return_value = [f"id{i}" for i in range(51)]

        response = client.get("/videos")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server error"
        assert "51" in body["details"]
        mock_provider.resolve.assert_not_awaited()

    def test_store_unavailable_is_500(self, client, mock_store):
        mock_store.list_ids.side_effect = StoreUnavailableError(details="database is locked")

        response = client.get("/videos")

        assert response.status_code == 500
        assert response.json() == {"error": "store unavailable", "details": "database is locked"}

    def test_unclassified_error_is_500(self, container):
        broken = MagicMock()
        broken.get_catalog = AsyncMock(side_effect=RuntimeError("boom"))
        container.catalog_service.override(providers.Object(broken))

        with TestClient(create_app(container), raise_server_exceptions=False) as client:
            response = client.get("/videos")

        assert response.status_code == 500
        assert response.json() == {"error": "server error", "details": "boom"}


class TestLifespan:
    """Connexion du store au demarrage."""

    def test_store_failure_at_startup_is_fatal(self, container):
        def _fail():
            raise StoreUnavailableError(details="connection refused")

        container.database.override(providers.Callable(_fail))

        with pytest.raises(StoreUnavailableError):
            with TestClient(create_app(container)):
                pass

    def test_shutdown_closes_provider_and_store(self, container):
        provider = MagicMock(spec=YouTubeClient)
        container.youtube_client.override(providers.Object(provider))
        container.database.reset_override()

        with TestClient(create_app(container)):
            database = container.database()
            assert database.is_connected

        provider.close.assert_awaited_once()
        assert not database.is_connected

    def test_store_closed_when_provider_close_fails(self, container):
        provider = MagicMock(spec=YouTubeClient)
        provider.close.side_effect = RuntimeError("close failed")
        container.youtube_client.override(providers.Object(provider))
        container.database.reset_override()

        with pytest.raises(RuntimeError):
            with TestClient(create_app(container)):
                database = container.database()

        assert not database.is_connected

    def test_idle_provider_opens_no_http_client(self, container):
        container.youtube_client.reset_override()

        with TestClient(create_app(container)):
            provider = container.youtube_client()

        assert isinstance(provider, YouTubeClient)
        assert provider._client is None
