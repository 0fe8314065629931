"""
Test d'integration : store SQLite reel + client YouTube (httpx mocke par respx).

Verifie la chaine complete seed -> lecture du store -> appel groupe -> resultat.
"""

from pathlib import Path

import httpx
import pytest
import pytest_asyncio
import respx

from vidcatalog.adapters.api.youtube_client import YouTubeClient
from vidcatalog.core.errors import EmptyCatalogError, ProviderUnreachableError
from vidcatalog.infrastructure.persistence.database import Database
from vidcatalog.infrastructure.persistence.video_id_repository import (
    SQLModelVideoIdRepository,
)
from vidcatalog.services.catalog import CatalogService
from vidcatalog.services.seeder import SeederService
from tests.fixtures.youtube_responses import RICK_ASTLEY, YOUTUBE_PARTIAL_RESPONSE

VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"


@pytest.fixture
def repository(tmp_path: Path):
    database = Database(f"sqlite:///{tmp_path}/catalog.db")
    database.connect()
    yield SQLModelVideoIdRepository(database)
    database.close()


@pytest_asyncio.fixture
async def youtube_client():
    client = YouTubeClient(api_key="test_api_key")
    yield client
    await client.close()


class TestCatalogIntegration:
    """Chaine complete sans reseau."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_seeded_store_to_catalog(self, repository, youtube_client):
        SeederService(store=repository).seed(["dQw4w9WgXcQ", "bad"])
        route = respx.get(VIDEOS_URL).mock(
            return_value=httpx.Response(200, json=YOUTUBE_PARTIAL_RESPONSE)
        )
        service = CatalogService(store=repository, provider=youtube_client, max_batch_size=50)

        records = await service.get_catalog()

        assert records == [RICK_ASTLEY]
        assert route.call_count == 1
        assert route.calls.last.request.url.params["id"] == "dQw4w9WgXcQ,bad"

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_store_makes_no_provider_call(self, repository, youtube_client):
        route = respx.get(VIDEOS_URL)
        service = CatalogService(store=repository, provider=youtube_client)

        with pytest.raises(EmptyCatalogError):
            await service.get_catalog()

        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_is_unreachable(self, repository, youtube_client):
        repository.replace_all(["a1"])
        respx.get(VIDEOS_URL).mock(side_effect=httpx.ReadTimeout("timed out"))
        service = CatalogService(store=repository, provider=youtube_client)

        with pytest.raises(ProviderUnreachableError):
            await service.get_catalog()
