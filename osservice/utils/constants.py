"""
Constantes globales pour OsService.

Ce module contient les constantes metier partagees:
- Bornes de longueur des champs client et ordre de service
- Devise par defaut des prix
- Politique des pieces jointes (types, extensions, taille maximale)
"""

# Client
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 150
PHONE_MAX_LENGTH = 30
EMAIL_MAX_LENGTH = 120
DOCUMENT_MAX_LENGTH = 30

# Ordre de service
DESCRIPTION_MIN_LENGTH = 1
DESCRIPTION_MAX_LENGTH = 500
DEFAULT_CURRENCY = "BRL"

# Prix : NUMERIC(18, 2), soit 16 chiffres avant la virgule
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2

# Premier numero attribue aux ordres de service
ORDER_NUMBER_START = 1000

# Pieces jointes (photos avant/apres)
ALLOWED_CONTENT_TYPES = frozenset({
    "image/jpeg",
    "image/png",
})

ALLOWED_EXTENSIONS = frozenset({
    ".jpg",
    ".jpeg",
    ".png",
})

# 5 Mio
MAX_FILE_SIZE_BYTES = 5 * 1024 * 1024

MAX_FILE_NAME_LENGTH = 255
