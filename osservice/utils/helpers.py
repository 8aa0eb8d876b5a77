"""
Fonctions utilitaires partagees dans le projet OsService.

Ce module centralise les fonctions reutilisees a travers le codebase :
- utcnow : horodatage UTC naif (format stocke en base)
- new_id : generation d'identifiants opaques
- clean_optional : nettoyage des champs texte optionnels
"""

import uuid
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Retourne l'instant courant en UTC, sans fuseau (convention de stockage)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convertit une date avec fuseau en UTC naif.

    Les dates naives sont considerees comme deja exprimees en UTC.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    """Genere un identifiant opaque (UUID4 en texte)."""
    return str(uuid.uuid4())


def clean_optional(value: Optional[str]) -> Optional[str]:
    """
    Retire les espaces d'un champ optionnel.

    Une chaine vide apres nettoyage devient None.
    """
    if value is None:
        return None
    value = value.strip()
    return value or None
