"""
Service des pieces jointes (photos avant/apres intervention).

Sequence d'un envoi :
1. Verification de l'existence de l'ordre de service
2. Politique d'acceptation (type, extension, taille) avant toute ecriture
3. Ecriture exclusive des octets sous {order_id}_{attachment_id}{ext}
4. Enregistrement des metadonnees avec le nom de fichier nettoye

L'operation est tout-ou-rien : un echec d'ecriture ne laisse aucun
enregistrement, un echec d'enregistrement supprime le fichier ecrit.
"""

from pathlib import Path

from loguru import logger

from osservice.core import attachment_policy
from osservice.core.entities import Attachment, AttachmentType
from osservice.core.errors import NotFoundError, OsServiceError
from osservice.core.ports.file_storage import IFileStorage
from osservice.core.ports.repositories import IAttachmentRepository, IServiceOrderRepository
from osservice.utils.helpers import new_id, utcnow


def storage_key(order_id: str, attachment_id: str, extension: str) -> str:
    """Construit la cle de stockage deterministe d'une piece jointe."""
    return f"{order_id}_{attachment_id}{extension}"


class AttachmentService:
    """
    Service d'envoi et de consultation des pieces jointes.

    Example:
        service = AttachmentService(
            order_repo=orders,
            attachment_repo=attachments,
            storage=LocalFileStorage(Path("data/uploads")),
        )
        attachment_id = service.upload(
            order_id, AttachmentType.BEFORE, "tela.jpg", "image/jpeg", len(data), data
        )
    """

    def __init__(
        self,
        order_repo: IServiceOrderRepository,
        attachment_repo: IAttachmentRepository,
        storage: IFileStorage,
    ) -> None:
        """
        Initialise le service.

        Args:
            order_repo: Repository des ordres de service (verification d'existence)
            attachment_repo: Repository des metadonnees de pieces jointes
            storage: Puits d'octets pour le contenu des fichiers
        """
        self._orders = order_repo
        self._attachments = attachment_repo
        self._storage = storage

    def upload(
        self,
        order_id: str,
        attachment_type: AttachmentType,
        file_name: str,
        content_type: str,
        size_bytes: int,
        data: bytes,
    ) -> str:
        """
        Valide, stocke et enregistre une piece jointe.

        Returns:
            L'ID de la piece jointe creee

        Raises:
            NotFoundError: Si l'ordre n'existe pas
            UnsupportedTypeError: Type MIME ou extension refuses
            InvalidSizeError: Fichier vide ou trop volumineux
            StorageError: Echec d'ecriture (aucun enregistrement cree)
        """
        logger.info(
            f"Envoi d'une piece jointe {attachment_type.value} pour l'ordre {order_id} : {file_name!r}"
        )

        if self._orders.get_by_id(order_id) is None:
            logger.warning(f"Envoi refuse : ordre introuvable ({order_id})")
            raise NotFoundError("Ordre de service", order_id)

        try:
            attachment_policy.validate(content_type, file_name, size_bytes)
        except OsServiceError as e:
            logger.warning(f"Envoi refuse pour l'ordre {order_id} : {e}")
            raise

        attachment_id = new_id()
        extension = attachment_policy.file_extension(file_name)
        path = storage_key(order_id, attachment_id, extension)

        self._storage.write_exclusive(path, data)

        attachment = Attachment(
            id=attachment_id,
            service_order_id=order_id,
            type=attachment_type,
            file_name=attachment_policy.sanitize_file_name(file_name),
            content_type=content_type,
            size_bytes=size_bytes,
            storage_path=path,
            uploaded_at=utcnow(),
        )
        try:
            self._attachments.insert(attachment)
        except Exception:
            logger.error(f"Enregistrement de la piece jointe {attachment_id} echoue, fichier supprime")
            self._storage.delete(path)
            raise

        logger.info(f"Piece jointe enregistree : {attachment_id} ({path})")
        return attachment_id

    def list_attachments(self, order_id: str) -> list[Attachment]:
        """
        Liste les pieces jointes d'un ordre, par date d'envoi croissante.

        Raises:
            NotFoundError: Si l'ordre n'existe pas
        """
        if self._orders.get_by_id(order_id) is None:
            raise NotFoundError("Ordre de service", order_id)
        return self._attachments.list_by_order(order_id)

    def get_attachment(self, attachment_id: str) -> Attachment:
        """
        Recupere les metadonnees d'une piece jointe.

        Raises:
            NotFoundError: Si la piece jointe n'existe pas
        """
        attachment = self._attachments.get_by_id(attachment_id)
        if attachment is None:
            raise NotFoundError("Piece jointe", attachment_id)
        return attachment

    def open_attachment(self, attachment_id: str) -> tuple[Attachment, Path]:
        """
        Retourne une piece jointe et le chemin local de son contenu.

        Raises:
            NotFoundError: Si l'enregistrement ou le fichier stocke est absent
        """
        attachment = self.get_attachment(attachment_id)
        if not self._storage.exists(attachment.storage_path):
            logger.warning(f"Fichier absent du stockage : {attachment.storage_path}")
            raise NotFoundError("Fichier de la piece jointe", attachment_id)
        return attachment, self._storage.resolve(attachment.storage_path)
