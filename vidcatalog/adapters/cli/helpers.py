"""
Utilitaires partages pour les commandes CLI de VidCatalog.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container dont le store est connecte
"""

import inspect
from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from vidcatalog.container import Container
from vidcatalog.core.errors import StoreUnavailableError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("vidcatalog")
    try:
        yield
    finally:
        loguru_logger.enable("vidcatalog")


def _connect(container: Container) -> None:
    """Connecte le store ; un echec termine la commande (code 1)."""
    try:
        container.database.init()
    except StoreUnavailableError as exc:
        console.print(f"[red]Connexion au store impossible:[/red] {exc.details}")
        raise typer.Exit(code=1) from exc


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Fonctionne pour les fonctions sync et async. Le store est ferme a la
    fin de la commande.

    Args:
        requires_db: Si True (defaut), connecte le store avant l'appel.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                container = Container()
                if requires_db:
                    _connect(container)
                try:
                    return await func(container, *args, **kwargs)
                finally:
                    container.shutdown_resources()
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                _connect(container)
            try:
                return func(container, *args, **kwargs)
            finally:
                container.shutdown_resources()
        return wrapper
    return decorator
