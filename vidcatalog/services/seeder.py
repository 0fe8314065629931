"""
Service de peuplement du store des identifiants.

Operation ponctuelle qui remplace l'ensemble des identifiants stockes.
Jamais appelee par le catalogue pendant le traitement des requetes.
"""

from collections.abc import Sequence
from typing import Optional

from loguru import logger

from vidcatalog.core.ports.repositories import IVideoIdRepository
from vidcatalog.utils.constants import DEFAULT_SEED_VIDEO_IDS


class SeederService:
    """Remplace le contenu du store par une liste d'identifiants."""

    def __init__(self, store: IVideoIdRepository) -> None:
        self._store = store

    def seed(self, video_ids: Optional[Sequence[str]] = None) -> int:
        """
        Remplace les identifiants stockes.

        Args:
            video_ids: Identifiants a inserer tels quels, liste par defaut si
                None ou vide

        Returns:
            Nombre d'identifiants inseres
        """
        ids = list(video_ids or DEFAULT_SEED_VIDEO_IDS)
        inserted = self._store.replace_all(ids)
        logger.info("Seeding termine", inserted=inserted)
        return inserted
