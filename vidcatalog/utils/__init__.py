"""Utilitaires partages de VidCatalog."""
