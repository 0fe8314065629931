"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des
identifiants video. Les implémentations (adaptateurs) fournissent le stockage
concret (SQLite/PostgreSQL via SQLModel, faux store en mémoire pour les tests).
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class IVideoIdRepository(ABC):
    """
    Interface de stockage des identifiants video.

    Le store est en lecture seule pour le catalogue ; seule la commande de
    seeding remplace son contenu.
    """

    @abstractmethod
    def list_ids(self) -> list[str]:
        """
        Liste tous les identifiants stockés.

        Aucun filtrage, tri ni déduplication : l'ordre est celui du store.

        Lève :
            StoreUnavailableError : si le store est injoignable
        """
        ...

    @abstractmethod
    def replace_all(self, video_ids: Sequence[str]) -> int:
        """Remplace l'ensemble des identifiants stockés. Retourne le nombre inséré."""
        ...
