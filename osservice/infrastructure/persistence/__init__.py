"""
Module de persistance pour OsService.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports de persistance

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from osservice.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///data/osservice.db")
    init_db(engine)  # Cree les tables si necessaire
"""

from osservice.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    get_session,
    init_db,
)
from osservice.infrastructure.persistence.models import (
    AttachmentModel,
    CustomerModel,
    SequenceModel,
    ServiceOrderModel,
)

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session",
    "init_db",
    "CustomerModel",
    "ServiceOrderModel",
    "AttachmentModel",
    "SequenceModel",
]
