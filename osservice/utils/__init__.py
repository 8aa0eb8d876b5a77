"""
Utilitaires et constantes pour OsService.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from osservice.utils.constants import (
    ALLOWED_CONTENT_TYPES,
    ALLOWED_EXTENSIONS,
    DEFAULT_CURRENCY,
    MAX_FILE_SIZE_BYTES,
)
from osservice.utils.helpers import clean_optional, new_id, utcnow

__all__ = [
    "ALLOWED_CONTENT_TYPES",
    "ALLOWED_EXTENSIONS",
    "DEFAULT_CURRENCY",
    "MAX_FILE_SIZE_BYTES",
    "clean_optional",
    "new_id",
    "utcnow",
]
