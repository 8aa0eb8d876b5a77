"""
Interface port pour le stockage des fichiers.

Interface abstraite (port) définissant le contrat du puits d'octets utilisé
pour les pièces jointes. Les implémentations (adaptateurs) fourniront l'accès
concret (disque local, stockage objet, etc.).
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IFileStorage(ABC):
    """
    Interface de stockage des fichiers.

    Les chemins manipulés sont des clés relatives et opaques pour le domaine.
    """

    @abstractmethod
    def write_exclusive(self, path: str, data: bytes) -> None:
        """
        Écrit des octets sous une clé qui ne doit pas déjà exister.

        Args :
            path : Clé relative du fichier
            data : Contenu à écrire

        Raises :
            StorageError : Si la clé existe déjà ou en cas d'erreur d'E/S.
                Aucun fichier partiel n'est laissé en place.
        """
        ...

    @abstractmethod
    def delete(self, path: str) -> bool:
        """
        Supprime un fichier stocké.

        Retourne :
            True si supprimé, False sinon
        """
        ...

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Vérifie si une clé est présente dans le stockage."""
        ...

    @abstractmethod
    def resolve(self, path: str) -> Path:
        """Retourne le chemin local correspondant à une clé."""
        ...
