"""
Adaptateur de stockage des pieces jointes sur disque local.

Implementation concrete de IFileStorage. Les cles sont resolues sous un
repertoire racine ; toute cle qui sortirait de ce repertoire est refusee.
"""

from pathlib import Path

from loguru import logger

from osservice.core.errors import StorageError
from osservice.core.ports.file_storage import IFileStorage


class LocalFileStorage(IFileStorage):
    """
    Implementation de IFileStorage sur le systeme de fichiers local.

    Les ecritures utilisent le mode de creation exclusive ("xb") : deux
    envois concurrents ne peuvent jamais ecrire dans le meme fichier.
    """

    def __init__(self, root_dir: Path) -> None:
        """
        Initialise le stockage.

        Args:
            root_dir: Repertoire racine des fichiers (cree a la premiere ecriture)
        """
        self._root = Path(root_dir).expanduser()

    @property
    def root_dir(self) -> Path:
        return self._root

    def resolve(self, path: str) -> Path:
        """
        Retourne le chemin absolu d'une cle.

        Raises:
            StorageError: Si la cle sort du repertoire racine
        """
        root = self._root.resolve()
        target = (root / path).resolve()
        if target == root or root not in target.parents:
            raise StorageError(f"Chemin de stockage invalide : {path}")
        return target

    def write_exclusive(self, path: str, data: bytes) -> None:
        """
        Ecrit les octets dans un nouveau fichier.

        En cas d'erreur pendant l'ecriture, le fichier partiel est supprime.
        """
        target = self.resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            handle = open(target, "xb")
        except FileExistsError as e:
            raise StorageError(f"Le fichier existe deja : {path}") from e
        except OSError as e:
            raise StorageError(f"Impossible de creer {path} : {e}") from e

        try:
            with handle:
                handle.write(data)
        except OSError as e:
            # Nettoyer le fichier partiel
            target.unlink(missing_ok=True)
            raise StorageError(f"Echec d'ecriture de {path} : {e}") from e

        logger.debug(f"Fichier stocke : {target} ({len(data)} octets)")

    def delete(self, path: str) -> bool:
        """Supprime un fichier stocke."""
        try:
            self.resolve(path).unlink()
            return True
        except (OSError, StorageError):
            return False

    def exists(self, path: str) -> bool:
        """Verifie si un fichier est present."""
        try:
            return self.resolve(path).is_file()
        except StorageError:
            return False
