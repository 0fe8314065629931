"""
Clients API externes pour la resolution des metadonnees video.

Ce module fournit l'adaptateur vers le fournisseur de metadonnees:
- YouTubeClient: YouTube Data API v3 (endpoint /videos, appel groupe)

Les clients implementent IVideoMetadataProvider defini dans core/ports/video_provider.py.
"""

from vidcatalog.adapters.api.youtube_client import YouTubeClient

__all__ = [
    "YouTubeClient",
]
