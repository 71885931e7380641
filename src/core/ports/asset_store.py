"""
Interface port pour le stockage des fichiers envoyés.

Le stockage ne connaît rien du catalogue : il reçoit un flux binaire,
le persiste sous un nom unique et retourne ce nom comme référence.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator


class IAssetStore(ABC):
    """
    Interface de stockage de fichiers binaires (miniatures, vidéos).

    Les noms générés sont uniques par construction : aucune coordination
    n'est nécessaire entre écritures concurrentes.
    """

    @abstractmethod
    def store(self, stream: BinaryIO, original_name: str, content_type: str) -> str:
        """
        Persiste un flux binaire sous un nom généré.

        Args :
            stream : Contenu à écrire
            original_name : Nom de fichier original (l'extension est conservée)
            content_type : Type MIME déclaré (indicatif)

        Retourne :
            La référence stable du fichier stocké

        Lève :
            StoreUnavailable : si le support refuse l'écriture
        """
        ...

    @abstractmethod
    def resolve(self, reference: str) -> BinaryIO:
        """
        Ouvre le fichier stocké en lecture binaire.

        Lève :
            AssetNotFound : si la référence est inconnue
        """
        ...

    @abstractmethod
    def exists(self, reference: str) -> bool:
        """Vérifie si une référence désigne un fichier stocké."""
        ...

    @abstractmethod
    def delete(self, reference: str) -> bool:
        """Supprime un fichier stocké. Retourne True si supprimé."""
        ...

    @abstractmethod
    def list_references(self) -> Iterator[str]:
        """Itère sur toutes les références stockées."""
        ...
