"""
Hierarchie des erreurs metier d'OsService.

Chaque exception porte un ErrorKind explicite. Les entites levent l'erreur la
plus specifique, les services la propagent sans la transformer, et seule la
couche web traduit le ErrorKind en code HTTP.

Les conflits d'etat (doublon, transition invalide, prix manquant, ordre
termine) dependent de l'etat persiste et non de la seule requete : ils sont
distingues des erreurs de validation via ErrorKind.is_conflict.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Categorie d'une erreur metier."""

    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    INVALID_TRANSITION = "invalid_transition"
    MISSING_PRICE = "missing_price"
    INVALID_STATE = "invalid_state"
    UNSUPPORTED_TYPE = "unsupported_type"
    INVALID_SIZE = "invalid_size"
    ALREADY_SET = "already_set"
    STORAGE = "storage"
    CORRUPT_RECORD = "corrupt_record"

    @property
    def is_conflict(self) -> bool:
        """True si l'erreur provient de l'etat persiste (conflit)."""
        return self in _CONFLICT_KINDS


_CONFLICT_KINDS = frozenset({
    ErrorKind.DUPLICATE,
    ErrorKind.INVALID_TRANSITION,
    ErrorKind.MISSING_PRICE,
    ErrorKind.INVALID_STATE,
})


class OsServiceError(Exception):
    """Base de toutes les erreurs OsService."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(OsServiceError):
    """Donnee d'entree mal formee ou hors bornes (corrigeable par l'appelant)."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class DuplicateError(OsServiceError):
    """
    Conflit d'unicite sur le document ou le telephone d'un client.

    Attributes:
        field: Nom du champ en conflit ("document" ou "phone")
    """

    kind = ErrorKind.DUPLICATE

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Un client avec ce {field} existe deja.")


class NotFoundError(OsServiceError):
    """L'entite referencee n'existe pas."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: Optional[str] = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            super().__init__(f"{entity} introuvable.")
        else:
            super().__init__(f"{entity} introuvable : {entity_id}")


class InvalidTransitionError(OsServiceError):
    """Changement de statut non autorise depuis le statut courant."""

    kind = ErrorKind.INVALID_TRANSITION


class MissingPriceError(OsServiceError):
    """Tentative de terminer un ordre de service sans prix."""

    kind = ErrorKind.MISSING_PRICE


class InvalidStateError(OsServiceError):
    """Operation impossible dans l'etat courant (ex: prix d'un ordre termine)."""

    kind = ErrorKind.INVALID_STATE


class UnsupportedTypeError(OsServiceError):
    """Type de contenu ou extension de piece jointe refuse."""

    kind = ErrorKind.UNSUPPORTED_TYPE


class InvalidSizeError(OsServiceError):
    """Taille de piece jointe nulle ou superieure a la limite."""

    kind = ErrorKind.INVALID_SIZE


class AlreadySetError(OsServiceError):
    """Valeur assignable une seule fois deja assignee."""

    kind = ErrorKind.ALREADY_SET


class StorageError(OsServiceError):
    """Echec d'ecriture ou de lecture dans le stockage des fichiers."""

    kind = ErrorKind.STORAGE


class CorruptRecordError(OsServiceError):
    """Valeur persistee impossible a decoder (ex: code de statut inconnu)."""

    kind = ErrorKind.CORRUPT_RECORD
