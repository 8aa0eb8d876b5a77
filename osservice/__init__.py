"""
OsService - Gestion des ordres de service d'un atelier de reparation.

Ce package enregistre les clients, ouvre des ordres de service, suit leur
cycle de vie (ouvert, en cours, termine), gere le prix et stocke les photos
avant/apres intervention.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, politique des pieces jointes, erreurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Persistance SQLModel
- adapters/ : Stockage des fichiers
- web/ : API JSON FastAPI
"""

__version__ = "0.1.0"
