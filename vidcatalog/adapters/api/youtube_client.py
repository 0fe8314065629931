"""
Client YouTube Data API v3 pour la resolution des metadonnees video.

Implemente l'interface IVideoMetadataProvider. Un seul appel groupe par lot
d'identifiants, sans retry ni cache : chaque echec est traduit vers la
taxonomie du catalogue.

Usage:
    client = YouTubeClient(api_key="your_key")
    items = await client.resolve(["dQw4w9WgXcQ", "jNQXAC9IVRw"])
    await client.close()
"""

from collections.abc import Sequence
from typing import Any, Optional

import httpx
from loguru import logger

from vidcatalog.core.errors import (
    InternalRequestError,
    ProviderRejectedError,
    ProviderUnreachableError,
)
from vidcatalog.core.ports.video_provider import IVideoMetadataProvider, VideoRecord


def _error_payload(response: httpx.Response) -> Any:
    """Retourne le corps d'erreur du fournisseur (JSON decode, sinon texte brut)."""
    try:
        return response.json()
    except ValueError:
        return response.text


class YouTubeClient(IVideoMetadataProvider):
    """
    Client API YouTube pour les metadonnees de videos.

    Attributes:
        YOUTUBE_BASE_URL: URL de base de l'API YouTube Data v3
        VIDEO_PARTS: Parties de ressource demandees pour chaque video

    Example:
        client = YouTubeClient(api_key="xxx")
        items = await client.resolve(["a1", "a2"])
        for item in items:
            print(item["snippet"]["title"])
        await client.close()
    """

    YOUTUBE_BASE_URL = "https://www.googleapis.com/youtube/v3"
    VIDEO_PARTS = "snippet,contentDetails"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = YOUTUBE_BASE_URL,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialise le client YouTube.

        Args:
            api_key: Cle API YouTube Data v3
            base_url: URL de base de l'API (surchargeable pour les tests)
            timeout: Timeout en secondes, None pour garder le defaut httpx
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure pour l'API YouTube
        """
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {
                "base_url": self._base_url,
                "headers": {"Accept": "application/json"},
            }
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant du fournisseur."""
        return "youtube"

    async def resolve(self, video_ids: Sequence[str]) -> list[VideoRecord]:
        """
        Recupere les metadonnees de tous les identifiants en un seul appel.

        Args:
            video_ids: Identifiants a resoudre, joints par des virgules

        Returns:
            Les items YouTube dans l'ordre de l'API (liste vide si aucun)

        Raises:
            ProviderUnreachableError: Aucune reponse (timeout, DNS, connexion)
            ProviderRejectedError: Statut d'erreur renvoye par YouTube
            InternalRequestError: Cle manquante, requete invalide, corps illisible
        """
        if not self._api_key:
            raise InternalRequestError(details="YouTube API key is not configured")

        params = {
            "part": self.VIDEO_PARTS,
            "id": ",".join(video_ids),
            "key": self._api_key,
        }

        client = self._get_client()
        try:
            response = await client.get("/videos", params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            payload = _error_payload(exc.response)
            logger.error(
                "Erreur API YouTube",
                status=exc.response.status_code,
                payload=payload,
            )
            raise ProviderRejectedError(exc.response.status_code, payload) from exc
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as exc:
            # Requete mal construite localement : rien n'est parti sur le reseau
            raise InternalRequestError(details=str(exc)) from exc
        except httpx.TransportError as exc:
            logger.error("Pas de reponse de l'API YouTube", error=repr(exc))
            raise ProviderUnreachableError(details=repr(exc)) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise InternalRequestError(details=f"invalid JSON from provider: {exc}") from exc
        if not isinstance(data, dict):
            raise InternalRequestError(details="unexpected provider response shape")

        items = data.get("items") or []
        if not isinstance(items, list):
            raise InternalRequestError(details="unexpected provider response shape")
        logger.debug(
            "Reponse YouTube recue",
            requested=len(video_ids),
            resolved=len(items),
        )
        return items

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
