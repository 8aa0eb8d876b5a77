"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- ICustomerRepository : Stockage des clients
- IServiceOrderRepository : Stockage des ordres de service
- IAttachmentRepository : Stockage des métadonnées de pièces jointes

Port stockage : Contrat pour les fichiers
- IFileStorage : Écriture exclusive et lecture des fichiers attachés
"""

from osservice.core.ports.file_storage import IFileStorage
from osservice.core.ports.repositories import (
    IAttachmentRepository,
    ICustomerRepository,
    IServiceOrderRepository,
)

__all__ = [
    # Repositories
    "ICustomerRepository",
    "IServiceOrderRepository",
    "IAttachmentRepository",
    # Stockage
    "IFileStorage",
]
