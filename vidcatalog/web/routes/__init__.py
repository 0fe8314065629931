"""Routes HTTP de VidCatalog."""
