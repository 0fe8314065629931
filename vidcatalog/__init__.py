"""
VidCatalog - Service de catalogue de videos.

Ce package lit une liste d'identifiants video stockee en base, interroge
l'API YouTube en un seul appel groupe et renvoie les metadonnees aux clients.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, taxonomie d'erreurs)
- services/ : Couche application (agregation du catalogue, seeding)
- adapters/ : Couche infrastructure (CLI, client API YouTube)
- infrastructure/ : Persistance SQLModel
- web/ : Application FastAPI
"""

__version__ = "0.1.0"
