"""
Politique d'acceptation des pièces jointes.

Toutes les règles sont vérifiées avant l'écriture du moindre octet :
- type MIME image/jpeg ou image/png (insensible à la casse)
- extension .jpg, .jpeg ou .png (insensible à la casse)
- taille strictement positive et au plus 5 Mio

La première règle en échec est signalée. Le nom de fichier est nettoyé
ensuite, une fois la validation réussie.
"""

import os

from pathvalidate import ValidationError as PathValidationError
from pathvalidate import sanitize_filename

from osservice.core.errors import InvalidSizeError, UnsupportedTypeError
from osservice.utils.constants import (
    ALLOWED_CONTENT_TYPES,
    ALLOWED_EXTENSIONS,
    MAX_FILE_NAME_LENGTH,
    MAX_FILE_SIZE_BYTES,
)

# Nom utilise quand le nettoyage ne laisse aucun caractere
FALLBACK_STEM = "attachment"


def file_extension(file_name: str) -> str:
    """Retourne l'extension en minuscules (avec le point), ou une chaîne vide."""
    return os.path.splitext(file_name or "")[1].lower()


def validate(content_type: str, file_name: str, size_bytes: int) -> None:
    """
    Vérifie qu'un fichier envoyé respecte la politique.

    Args:
        content_type: Type MIME déclaré
        file_name: Nom de fichier d'origine
        size_bytes: Taille déclarée en octets

    Raises:
        UnsupportedTypeError: Type MIME ou extension refusés
        InvalidSizeError: Fichier vide ou trop volumineux
    """
    if (content_type or "").strip().lower() not in ALLOWED_CONTENT_TYPES:
        raise UnsupportedTypeError("Seules les images JPEG et PNG sont acceptées.")

    if file_extension(file_name) not in ALLOWED_EXTENSIONS:
        raise UnsupportedTypeError("Seules les extensions .jpg, .jpeg et .png sont acceptées.")

    if size_bytes is None or size_bytes <= 0:
        raise InvalidSizeError("Le fichier est vide.")

    if size_bytes > MAX_FILE_SIZE_BYTES:
        raise InvalidSizeError(
            f"La taille du fichier ne peut pas dépasser {MAX_FILE_SIZE_BYTES // 1024 // 1024} Mo."
        )


def sanitize_file_name(file_name: str) -> str:
    """
    Nettoie un nom de fichier pour la persistance.

    Retire les caractères interdits dans un chemin (toutes plateformes)
    et tronque à 255 caractères.
    """
    try:
        sanitized = sanitize_filename(
            file_name or "",
            platform="universal",
            replacement_text="",
            max_len=MAX_FILE_NAME_LENGTH,
        )
    except PathValidationError:
        # Nom vide ou reserve apres nettoyage
        sanitized = ""

    if not sanitized or sanitized == file_extension(file_name):
        sanitized = f"{FALLBACK_STEM}{file_extension(file_name)}"
    return sanitized[:MAX_FILE_NAME_LENGTH]
