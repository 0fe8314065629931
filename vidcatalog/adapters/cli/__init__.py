"""Sous-package CLI - re-exporte les commandes publiques."""

from vidcatalog.adapters.cli.commands import catalog, ids, seed

__all__ = [
    "catalog",
    "ids",
    "seed",
]
