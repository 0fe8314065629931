"""
Taxonomie des erreurs du catalogue.

Chaque echec d'une requete catalogue est classe selon son origine afin que
les clients puissent distinguer "rien a afficher" de "service degrade".
La correspondance vers les codes HTTP est faite dans la couche web.
"""

from typing import Any, Optional


class CatalogError(Exception):
    """
    Erreur de base du catalogue.

    Attributes:
        message: Message court destine au client
        details: Informations de diagnostic optionnelles (texte ou payload JSON)
    """

    default_message = "server error"

    def __init__(self, message: Optional[str] = None, details: Any = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class StoreUnavailableError(CatalogError):
    """Le store d'identifiants est injoignable ou pas encore connecte."""

    default_message = "store unavailable"


class EmptyCatalogError(CatalogError):
    """Le store ne contient aucun identifiant (probleme de peuplement)."""

    default_message = "no identifiers on record"


class ProviderError(CatalogError):
    """Base des erreurs provenant du fournisseur de metadonnees."""


class ProviderUnreachableError(ProviderError):
    """Aucune reponse du fournisseur (timeout, DNS, connexion refusee...)."""

    default_message = "no response from provider"


class ProviderRejectedError(ProviderError):
    """
    Le fournisseur a repondu avec un statut d'erreur.

    Attributes:
        status_code: Statut HTTP renvoye par le fournisseur
        payload: Corps d'erreur du fournisseur, transmis tel quel au client
    """

    default_message = "provider error"

    def __init__(self, status_code: int, payload: Any) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(details=payload)


class ProviderEmptyResultError(ProviderError):
    """Le fournisseur n'a resolu aucun des identifiants demandes."""

    default_message = "no videos found from provider"


class InternalRequestError(CatalogError):
    """Echec local lors de la construction ou de l'envoi de la requete."""

    default_message = "server error"


class BatchTooLargeError(InternalRequestError):
    """
    Le lot d'identifiants depasse la limite par appel du fournisseur.

    Le lot est rejete avant tout appel reseau plutot que decoupe.
    """

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            details=f"{count} identifiers exceed the provider limit of {limit} per call"
        )
