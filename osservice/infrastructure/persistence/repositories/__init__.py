"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans osservice/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from osservice.infrastructure.persistence.repositories.attachment_repository import (
    SQLModelAttachmentRepository,
)
from osservice.infrastructure.persistence.repositories.customer_repository import (
    SQLModelCustomerRepository,
)
from osservice.infrastructure.persistence.repositories.service_order_repository import (
    SQLModelServiceOrderRepository,
)

__all__ = [
    "SQLModelCustomerRepository",
    "SQLModelServiceOrderRepository",
    "SQLModelAttachmentRepository",
]
