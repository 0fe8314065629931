"""
Couche application (services).

- CatalogService : agregation store + fournisseur pour GET /videos
- SeederService : remplacement ponctuel des identifiants stockes
"""

from vidcatalog.services.catalog import CatalogService
from vidcatalog.services.seeder import SeederService

__all__ = [
    "CatalogService",
    "SeederService",
]
