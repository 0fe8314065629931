"""
Implementation SQLModel du repository des identifiants video.

Implemente l'interface IVideoIdRepository. Chaque operation ouvre sa propre
session, ce qui permet des lectures concurrentes depuis plusieurs threads.
"""

from collections.abc import Sequence

from loguru import logger
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from vidcatalog.core.errors import StoreUnavailableError
from vidcatalog.core.ports.repositories import IVideoIdRepository
from vidcatalog.infrastructure.persistence.database import Database
from vidcatalog.infrastructure.persistence.models import VideoIdModel


class SQLModelVideoIdRepository(IVideoIdRepository):
    """
    Repository SQLModel pour les identifiants video.

    Les erreurs SQLAlchemy sont traduites en StoreUnavailableError.
    """

    def __init__(self, database: Database) -> None:
        """
        Initialise le repository avec le handle du store.

        Args :
            database : Handle connecte une fois au demarrage
        """
        self._database = database

    def list_ids(self) -> list[str]:
        """Liste les identifiants dans l'ordre du store, doublons compris."""
        try:
            with self._database.session() as session:
                video_ids = list(session.exec(select(VideoIdModel.video_id)).all())
        except SQLAlchemyError as exc:
            logger.error("Lecture du store impossible", error=str(exc))
            raise StoreUnavailableError(details=str(exc)) from exc

        logger.debug("Identifiants lus depuis le store", count=len(video_ids))
        return video_ids

    def replace_all(self, video_ids: Sequence[str]) -> int:
        """
        Remplace tous les identifiants en une seule transaction.

        Args :
            video_ids : Nouveaux identifiants, inseres dans l'ordre donne

        Retourne :
            Le nombre d'identifiants inseres
        """
        try:
            with self._database.session() as session:
                session.exec(delete(VideoIdModel))
                session.add_all(VideoIdModel(video_id=video_id) for video_id in video_ids)
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(details=str(exc)) from exc

        logger.info("Store remplace", count=len(video_ids))
        return len(video_ids)
