"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

- file_storage.py : Stockage des pièces jointes sur disque local

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
Cela permet de changer les implémentations sans affecter la logique métier.
"""

from osservice.adapters.file_storage import LocalFileStorage

__all__ = [
    "LocalFileStorage",
]
