"""
Commandes CLI du catalogue : seed, ids, catalog.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from vidcatalog.adapters.api.youtube_client import YouTubeClient
from vidcatalog.adapters.cli.helpers import console, suppress_loguru, with_container
from vidcatalog.core.errors import CatalogError


def seed(
    video_ids: Annotated[
        Optional[list[str]],
        typer.Argument(help="Identifiants YouTube (liste par defaut si omis)"),
    ] = None,
) -> None:
    """Remplace les identifiants stockes par la liste donnee."""
    _seed(video_ids)


@with_container()
def _seed(container, video_ids: Optional[list[str]]) -> None:
    """Implementation de la commande seed."""
    try:
        inserted = container.seeder_service().seed(video_ids)
    except CatalogError as exc:
        console.print(f"[red]Seeding impossible:[/red] {exc.details or exc.message}")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]✓[/green] {inserted} identifiant(s) insere(s)")


def ids() -> None:
    """Affiche les identifiants stockes."""
    _ids()


@with_container()
def _ids(container) -> None:
    """Implementation de la commande ids."""
    try:
        video_ids = container.video_id_repository().list_ids()
    except CatalogError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1) from exc

    if not video_ids:
        console.print("[yellow]Aucun identifiant en base.[/yellow]")
        return
    for video_id in video_ids:
        console.print(video_id)
    console.print(f"\n[dim]Total: {len(video_ids)}[/dim]")


def catalog() -> None:
    """Construit le catalogue une fois et l'affiche."""
    asyncio.run(_catalog_async())


@with_container()
async def _catalog_async(container) -> None:
    """Implementation async de la commande catalog."""
    service = container.catalog_service()
    provider = container.youtube_client()
    try:
        with suppress_loguru():
            records = await service.get_catalog()
    except CatalogError as exc:
        console.print(f"[red]{exc.message}[/red]")
        if exc.details is not None:
            console.print(f"[dim]{exc.details}[/dim]")
        raise typer.Exit(code=1) from exc
    finally:
        if isinstance(provider, YouTubeClient):
            await provider.close()

    table = Table(title=f"Catalogue ({len(records)} video(s))")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Titre")
    table.add_column("Chaine", style="magenta")
    for record in records:
        snippet = record.get("snippet") or {}
        table.add_row(
            str(record.get("id", "")),
            snippet.get("title", ""),
            snippet.get("channelTitle", ""),
        )
    console.print(table)
