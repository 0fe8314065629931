"""Interface web (FastAPI) de VidCatalog."""
