"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- ICatalogRepository : Stockage des entrées de catalogue
- IPrincipalRepository : Stockage des comptes

Port stockage : Contrat d'écriture et de lecture des fichiers envoyés
- IAssetStore

Ports sécurité : Contrats du collaborateur d'authentification
- IPasswordHasher : Hachage des mots de passe
- ITokenCodec : Émission et décodage des jetons d'accès
"""

from src.core.ports.asset_store import IAssetStore
from src.core.ports.repositories import ICatalogRepository, IPrincipalRepository
from src.core.ports.security import IPasswordHasher, ITokenCodec

__all__ = [
    # Repositories
    "ICatalogRepository",
    "IPrincipalRepository",
    # Stockage
    "IAssetStore",
    # Sécurité
    "IPasswordHasher",
    "ITokenCodec",
]
