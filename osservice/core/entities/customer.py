"""
Entité client.

Un client est créé une seule fois via la fabrique validante Customer.create()
et n'est jamais modifié ensuite. Customer.reconstitute() reconstruit un client
depuis des champs déjà validés (réservé à la couche de persistance).
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from osservice.core.errors import ValidationError
from osservice.utils.constants import (
    DOCUMENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PHONE_MAX_LENGTH,
)
from osservice.utils.helpers import clean_optional, new_id, utcnow

# Format minimal local@domaine.tld
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)


@dataclass
class Customer:
    """
    Client de l'atelier.

    Attributs :
        id : Identifiant opaque unique
        name : Nom (2 à 150 caractères, sans espaces superflus)
        phone : Téléphone optionnel, unique quand présent
        email : Email optionnel au format local@domaine.tld
        document : Document d'identité optionnel, unique quand présent
        created_at : Date de création (UTC), immuable
    """

    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    document: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        document: Optional[str] = None,
    ) -> "Customer":
        """
        Crée un nouveau client après validation de tous les champs.

        Les champs optionnels vides après nettoyage deviennent None.

        Raises:
            ValidationError: Si un champ viole ses contraintes
        """
        if name is None or not name.strip():
            raise ValidationError("Le nom est obligatoire.", field="name")

        name = name.strip()
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            raise ValidationError(
                f"Le nom doit contenir entre {NAME_MIN_LENGTH} et {NAME_MAX_LENGTH} caractères.",
                field="name",
            )

        phone = clean_optional(phone)
        if phone is not None and len(phone) > PHONE_MAX_LENGTH:
            raise ValidationError(
                f"Le téléphone doit contenir au plus {PHONE_MAX_LENGTH} caractères.",
                field="phone",
            )

        email = clean_optional(email)
        if email is not None:
            if len(email) > EMAIL_MAX_LENGTH:
                raise ValidationError(
                    f"L'email doit contenir au plus {EMAIL_MAX_LENGTH} caractères.",
                    field="email",
                )
            if not EMAIL_PATTERN.match(email):
                raise ValidationError("Le format de l'email est invalide.", field="email")

        document = clean_optional(document)
        if document is not None and len(document) > DOCUMENT_MAX_LENGTH:
            raise ValidationError(
                f"Le document doit contenir au plus {DOCUMENT_MAX_LENGTH} caractères.",
                field="document",
            )

        return cls(
            id=new_id(),
            name=name,
            phone=phone,
            email=email,
            document=document,
            created_at=utcnow(),
        )

    @classmethod
    def reconstitute(
        cls,
        id: str,
        name: str,
        phone: Optional[str],
        email: Optional[str],
        document: Optional[str],
        created_at: datetime,
    ) -> "Customer":
        """Reconstruit un client depuis la base, sans revalidation."""
        return cls(
            id=id,
            name=name,
            phone=phone,
            email=email,
            document=document,
            created_at=created_at,
        )
