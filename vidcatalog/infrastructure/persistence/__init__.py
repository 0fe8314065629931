"""
Module de persistance du store des identifiants.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy) :

- database.py : Handle de connexion (Database) et ressource d'initialisation
- models.py : Modele SQLModel de la table videos
- video_id_repository.py : Implementation de IVideoIdRepository

Usage:
    from vidcatalog.infrastructure.persistence import Database, SQLModelVideoIdRepository

    database = Database("sqlite:///vidcatalog.db")
    database.connect()
    repository = SQLModelVideoIdRepository(database)
    repository.list_ids()
"""

from vidcatalog.infrastructure.persistence.database import Database, init_database
from vidcatalog.infrastructure.persistence.models import VideoIdModel
from vidcatalog.infrastructure.persistence.video_id_repository import (
    SQLModelVideoIdRepository,
)

__all__ = [
    "Database",
    "init_database",
    "VideoIdModel",
    "SQLModelVideoIdRepository",
]
