"""
Codes entiers des enums persistes.

Le decodage est exhaustif : une valeur inconnue en base leve
CorruptRecordError plutot que de produire un statut par defaut.
"""

from osservice.core.entities import AttachmentType, ServiceOrderStatus
from osservice.core.errors import CorruptRecordError

STATUS_CODES: dict[ServiceOrderStatus, int] = {
    ServiceOrderStatus.OPEN: 0,
    ServiceOrderStatus.IN_PROGRESS: 1,
    ServiceOrderStatus.FINISHED: 2,
}
_STATUS_BY_CODE = {code: status for status, code in STATUS_CODES.items()}

ATTACHMENT_TYPE_CODES: dict[AttachmentType, int] = {
    AttachmentType.BEFORE: 0,
    AttachmentType.AFTER: 1,
}
_ATTACHMENT_TYPE_BY_CODE = {code: kind for kind, code in ATTACHMENT_TYPE_CODES.items()}


def decode_status(code: int) -> ServiceOrderStatus:
    """Decode un code de statut stocke."""
    try:
        return _STATUS_BY_CODE[code]
    except KeyError:
        raise CorruptRecordError(f"Code de statut inconnu : {code!r}") from None


def decode_attachment_type(code: int) -> AttachmentType:
    """Decode un code de type de piece jointe stocke."""
    try:
        return _ATTACHMENT_TYPE_BY_CODE[code]
    except KeyError:
        raise CorruptRecordError(f"Code de type de piece jointe inconnu : {code!r}") from None
