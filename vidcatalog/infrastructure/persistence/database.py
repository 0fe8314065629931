"""
Handle de connexion au store des identifiants.

Ce module fournit :
- Database : handle explicite (engine SQLAlchemy + sessions) injecte dans les repositories
- init_database : ressource d'initialisation unique au demarrage, fermee a l'arret

La connexion est etablie une seule fois par processus. Un echec a ce stade est
fatal : il n'y a pas de mode degrade ni de reconnexion automatique.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from vidcatalog.core.errors import StoreUnavailableError


class Database:
    """
    Handle du store, partage en lecture par toutes les requetes.

    Usage:
        database = Database("sqlite:///vidcatalog.db")
        database.connect()
        with database.session() as session:
            ...
        database.close()
    """

    def __init__(self, url: str) -> None:
        """
        Initialise le handle sans ouvrir de connexion.

        Args:
            url: Chaine de connexion SQLAlchemy
        """
        self._url = url
        self._engine: Optional[Engine] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        """Retourne l'engine, ou leve StoreUnavailableError si non connecte."""
        if self._engine is None:
            raise StoreUnavailableError(details="store is not connected")
        return self._engine

    def connect(self) -> None:
        """
        Cree l'engine, les tables manquantes et verifie la connexion.

        Raises:
            StoreUnavailableError: Si la base est injoignable
        """
        connect_args = {}
        if self._url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            # Creer le repertoire parent si l'URL est un fichier SQLite
            if self._url.startswith("sqlite:///") and ":memory:" not in self._url:
                db_path = Path(self._url.replace("sqlite:///", "", 1))
                db_path.parent.mkdir(exist_ok=True, parents=True)

        # Import des modeles pour enregistrer leurs metadonnees
        from vidcatalog.infrastructure.persistence import models  # noqa: F401

        engine: Optional[Engine] = None
        try:
            engine = create_engine(self._url, echo=False, connect_args=connect_args)
            SQLModel.metadata.create_all(engine)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            if engine is not None:
                engine.dispose()
            logger.error("Connexion au store impossible", error=str(exc))
            raise StoreUnavailableError(details=str(exc)) from exc

        self._engine = engine
        logger.info("Store connecte", url=engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        """Ouvre une nouvelle session SQLModel (a utiliser en context manager)."""
        return Session(self.engine)

    def close(self) -> None:
        """Libere le pool de connexions."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("Store ferme")


def init_database(database_url: str) -> Iterator[Database]:
    """
    Ressource du container : connecte le store au demarrage, le ferme a l'arret.

    Doit etre initialisee une fois au demarrage de l'application.
    """
    database = Database(database_url)
    database.connect()
    try:
        yield database
    finally:
        database.close()
