"""
Interface port pour le fournisseur de metadonnees video.

Le fournisseur resout un lot d'identifiants en enregistrements video. Les
enregistrements sont des payloads opaques, relayes tels quels au client.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

# Representation fournisseur d'une video (id, snippet, contentDetails...)
VideoRecord = dict[str, Any]


class IVideoMetadataProvider(ABC):
    """
    Interface des fournisseurs de metadonnees video.

    Les implementations traduisent leurs erreurs vers la taxonomie du
    catalogue : ProviderUnreachableError, ProviderRejectedError ou
    InternalRequestError.
    """

    @abstractmethod
    async def resolve(self, video_ids: Sequence[str]) -> list[VideoRecord]:
        """
        Resout un lot d'identifiants en un seul appel.

        Args:
            video_ids: Identifiants a resoudre, envoyes tels quels

        Returns:
            Enregistrements dans l'ordre du fournisseur. Les identifiants
            inconnus sont simplement absents (liste possiblement vide).
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant du fournisseur (ex: 'youtube')."""
        ...
