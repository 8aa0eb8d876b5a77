"""
Entité pièce jointe.

Photo prise avant ou après l'intervention, rattachée à un ordre de service.
Créée une seule fois lorsque le fichier validé a été stocké ; jamais modifiée
ni supprimée ensuite.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AttachmentType(Enum):
    """Moment de la prise de vue."""

    BEFORE = "before"
    AFTER = "after"


@dataclass
class Attachment:
    """
    Métadonnées d'un fichier attaché à un ordre de service.

    Attributs :
        id : Identifiant opaque unique
        service_order_id : Ordre de service propriétaire
        type : BEFORE ou AFTER
        file_name : Nom de fichier d'origine nettoyé (255 caractères max)
        content_type : Type MIME déclaré
        size_bytes : Taille déclarée en octets
        storage_path : Clé opaque dans le stockage des fichiers
        uploaded_at : Date d'envoi
    """

    id: str
    service_order_id: str
    type: AttachmentType
    file_name: str
    content_type: str
    size_bytes: int
    storage_path: str
    uploaded_at: Optional[datetime] = None
