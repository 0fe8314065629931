"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IVideoIdRepository : Stockage des identifiants video

Ports fournisseur : Contrats pour les services externes
- IVideoMetadataProvider : Résolution d'un lot d'identifiants en métadonnées
- VideoRecord : Enregistrement opaque renvoyé par le fournisseur
"""

from vidcatalog.core.ports.repositories import IVideoIdRepository
from vidcatalog.core.ports.video_provider import IVideoMetadataProvider, VideoRecord

__all__ = [
    # Repositories
    "IVideoIdRepository",
    # Fournisseur
    "IVideoMetadataProvider",
    "VideoRecord",
]
