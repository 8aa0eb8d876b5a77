"""
Implementation SQLModel du repository Attachment.

Implemente l'interface IAttachmentRepository pour les metadonnees des
photos avant/apres. Les octets eux-memes vivent dans le stockage de fichiers.
"""

from typing import Optional

from sqlmodel import Session, col, select

from osservice.core.entities import Attachment
from osservice.core.ports.repositories import IAttachmentRepository
from osservice.infrastructure.persistence.models import AttachmentModel
from osservice.infrastructure.persistence.repositories.codes import (
    ATTACHMENT_TYPE_CODES,
    decode_attachment_type,
)


class SQLModelAttachmentRepository(IAttachmentRepository):
    """Repository SQLModel pour les pieces jointes."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: AttachmentModel) -> Attachment:
        return Attachment(
            id=model.id,
            service_order_id=model.service_order_id,
            type=decode_attachment_type(model.attachment_type),
            file_name=model.file_name,
            content_type=model.content_type,
            size_bytes=model.file_size_bytes,
            storage_path=model.storage_path,
            uploaded_at=model.uploaded_at,
        )

    def _to_model(self, entity: Attachment) -> AttachmentModel:
        return AttachmentModel(
            id=entity.id,
            service_order_id=entity.service_order_id,
            attachment_type=ATTACHMENT_TYPE_CODES[entity.type],
            file_name=entity.file_name,
            content_type=entity.content_type,
            file_size_bytes=entity.size_bytes,
            storage_path=entity.storage_path,
            uploaded_at=entity.uploaded_at,
        )

    def insert(self, attachment: Attachment) -> None:
        """Insere une piece jointe."""
        self._session.add(self._to_model(attachment))
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def list_by_order(self, order_id: str) -> list[Attachment]:
        """Liste les pieces jointes d'un ordre, par date d'envoi croissante."""
        statement = (
            select(AttachmentModel)
            .where(AttachmentModel.service_order_id == order_id)
            .order_by(col(AttachmentModel.uploaded_at).asc())
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, attachment_id: str) -> Optional[Attachment]:
        """Recupere une piece jointe par son ID."""
        model = self._session.get(AttachmentModel, attachment_id)
        if model:
            return self._to_entity(model)
        return None
