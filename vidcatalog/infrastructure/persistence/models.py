"""
Modeles SQLModel pour le store VidCatalog.

Tables:
- videos: Identifiants video references dans l'espace de noms du fournisseur
"""

from sqlmodel import Field, SQLModel


class VideoIdModel(SQLModel, table=True):
    """
    Modele representant un identifiant video stocke.

    L'unicite n'est pas imposee : les doublons sont transmis tels quels
    au fournisseur.
    """

    __tablename__ = "videos"

    id: int | None = Field(default=None, primary_key=True)
    video_id: str = Field(index=True)
