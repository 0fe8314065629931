"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le handle du store est une Resource : connecte une fois au demarrage,
ferme a l'arret, et injecte explicitement dans le repository.
"""

from dependency_injector import containers, providers

from .adapters.api.youtube_client import YouTubeClient
from .config import Settings
from .infrastructure.persistence.database import init_database
from .infrastructure.persistence.video_id_repository import SQLModelVideoIdRepository
from .services.catalog import CatalogService
from .services.seeder import SeederService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Connecte le store une fois
        catalog = container.catalog_service()
        records = await catalog.get_catalog()

    Dans les tests, surcharger les providers avec des faux :
        container.video_id_repository.override(providers.Object(fake_store))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Store - Resource pour initialisation unique et fermeture a l'arret
    database = providers.Resource(
        init_database,
        database_url=config.provided.database_url,
    )

    # Repository - Singleton, chaque operation ouvre sa propre session
    video_id_repository = providers.Singleton(
        SQLModelVideoIdRepository,
        database=database,
    )

    # Client fournisseur - Singleton pour reutiliser le pool HTTP
    youtube_client = providers.Singleton(
        YouTubeClient,
        api_key=config.provided.youtube_api_key,
        base_url=config.provided.youtube_base_url,
        timeout=config.provided.provider_timeout,
    )

    # Services (stateless) - Factory, une instance par requete
    catalog_service = providers.Factory(
        CatalogService,
        store=video_id_repository,
        provider=youtube_client,
        max_batch_size=config.provided.max_batch_size,
    )

    seeder_service = providers.Factory(
        SeederService,
        store=video_id_repository,
    )
