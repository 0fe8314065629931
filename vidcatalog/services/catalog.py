"""
Service d'agregation du catalogue.

CatalogService joint le store des identifiants et le fournisseur de metadonnees :
lecture des identifiants, un seul appel groupe au fournisseur, validation du
resultat et classement des echecs par origine.

Responsabilites:
- Lire les identifiants stockes (une lecture par requete)
- Rejeter un catalogue vide avant tout appel fournisseur
- Appliquer la limite de lot du fournisseur (rejet, pas de decoupage)
- Relayer les enregistrements tels quels, dans l'ordre du fournisseur
"""

import asyncio
from typing import Optional

from loguru import logger

from vidcatalog.core.errors import (
    BatchTooLargeError,
    EmptyCatalogError,
    InternalRequestError,
    ProviderEmptyResultError,
    ProviderError,
    StoreUnavailableError,
)
from vidcatalog.core.ports.repositories import IVideoIdRepository
from vidcatalog.core.ports.video_provider import IVideoMetadataProvider, VideoRecord


class CatalogService:
    """
    Service d'agregation du catalogue video.

    Sans etat : chaque appel a get_catalog() est independant et peut
    s'executer en parallele d'autres appels. Aucun retry, aucun cache.

    Example:
        service = CatalogService(store=repo, provider=youtube_client)
        try:
            records = await service.get_catalog()
        except CatalogError as exc:
            print(exc.message)
    """

    def __init__(
        self,
        store: IVideoIdRepository,
        provider: IVideoMetadataProvider,
        max_batch_size: Optional[int] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            store: Repository des identifiants (lecture seule)
            provider: Fournisseur de metadonnees
            max_batch_size: Nombre maximum d'identifiants par appel, None sans limite
        """
        self._store = store
        self._provider = provider
        self._max_batch_size = max_batch_size

    async def get_catalog(self) -> list[VideoRecord]:
        """
        Construit le catalogue a jour.

        Returns:
            Liste non vide d'enregistrements, dans l'ordre du fournisseur.
            Elle peut etre plus courte que la liste d'identifiants.

        Raises:
            StoreUnavailableError: Lecture du store impossible
            EmptyCatalogError: Aucun identifiant en base
            BatchTooLargeError: Lot au-dela de la limite du fournisseur
            ProviderUnreachableError: Aucune reponse du fournisseur
            ProviderRejectedError: Erreur renvoyee par le fournisseur
            ProviderEmptyResultError: Aucun identifiant resolu
            InternalRequestError: Toute autre erreur de construction/envoi
        """
        video_ids = await self._read_ids()

        if not video_ids:
            logger.warning("Catalogue vide : aucun identifiant en base")
            raise EmptyCatalogError()

        if self._max_batch_size is not None and len(video_ids) > self._max_batch_size:
            logger.warning(
                "Lot rejete", count=len(video_ids), limit=self._max_batch_size
            )
            raise BatchTooLargeError(len(video_ids), self._max_batch_size)

        try:
            records = await self._provider.resolve(video_ids)
        except (ProviderError, InternalRequestError):
            raise
        except Exception as exc:
            logger.exception("Erreur inattendue lors de l'appel fournisseur")
            raise InternalRequestError(details=str(exc)) from exc

        if not records:
            logger.warning(
                "Aucune video resolue par le fournisseur",
                source=self._provider.source,
                requested=len(video_ids),
            )
            raise ProviderEmptyResultError()

        logger.debug(
            "Catalogue construit", requested=len(video_ids), resolved=len(records)
        )
        return records

    async def _read_ids(self) -> list[str]:
        """Lit les identifiants dans un thread (le store est synchrone)."""
        try:
            return await asyncio.to_thread(self._store.list_ids)
        except StoreUnavailableError:
            raise
        except Exception as exc:
            logger.error("Store injoignable", error=str(exc))
            raise StoreUnavailableError(details=str(exc)) from exc
