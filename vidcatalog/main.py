"""
Point d'entrée CLI de VidCatalog.

Configure le logging et fournit les commandes CLI (serveur web, seeding, catalogue).
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli import catalog, ids, seed
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="vidcatalog",
    help="Service de catalogue de vidéos YouTube",
)
container = Container()

app.command()(seed)
app.command()(ids)
app.command()(catalog)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _mask_secret(value: Optional[str]) -> str:
    """Masque une clé API en ne montrant que les 4 derniers caractères."""
    if not value:
        return "non définie"
    if len(value) <= 4:
        return "••••"
    return "••••" + value[-4:]


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API YouTube : {config.youtube_base_url}")
    typer.echo(f"Clé API : {_mask_secret(config.youtube_api_key)}")
    typer.echo(f"Taille de lot max : {config.max_batch_size or 'illimitée'}")
    typer.echo(f"Timeout fournisseur : {config.provider_timeout or 'défaut httpx'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"VidCatalog v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web VidCatalog."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("vidcatalog.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Démarrage de VidCatalog", version=__version__)

    app()


if __name__ == "__main__":
    main()
