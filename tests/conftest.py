"""
Fixtures pytest partagees pour les tests VidCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (IVideoIdRepository, IVideoMetadataProvider)
- Settings de test avec chemins temporaires
- Container DI dont les providers sont surcharges par les mocks
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers

from vidcatalog.config import Settings
from vidcatalog.container import Container
from vidcatalog.core.ports.repositories import IVideoIdRepository
from vidcatalog.core.ports.video_provider import IVideoMetadataProvider


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock de IVideoIdRepository pour les tests.

    Store vide par defaut. Configurer list_ids dans chaque test.
    """
    mock = MagicMock(spec=IVideoIdRepository)
    mock.list_ids.return_value = []
    mock.replace_all.side_effect = lambda ids: len(ids)
    return mock


@pytest.fixture
def mock_provider() -> AsyncMock:
    """
    Mock de IVideoMetadataProvider pour les tests.

    resolve() retourne une liste vide par defaut.
    """
    mock = AsyncMock(spec=IVideoMetadataProvider)
    mock.resolve.return_value = []
    mock.source = "fake"
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec une base SQLite temporaire.

    Utilise tmp_path de pytest pour isoler chaque test.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        youtube_api_key="test_api_key",
        max_batch_size=50,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def container(test_settings: Settings, mock_store: MagicMock, mock_provider: AsyncMock):
    """Container dont le store et le fournisseur sont remplaces par des mocks."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.override(providers.Object(None))
    container.video_id_repository.override(providers.Object(mock_store))
    container.youtube_client.override(providers.Object(mock_provider))
    yield container
    container.reset_override()
