"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

from osservice.core.entities import (
    Attachment,
    Customer,
    ServiceOrder,
    ServiceOrderStatus,
)


class ICustomerRepository(ABC):
    """
    Interface de stockage des clients.

    L'insertion doit lever DuplicateError si le stockage refuse le document
    ou le téléphone pour cause d'unicité.
    """

    @abstractmethod
    def insert(self, customer: Customer) -> None:
        """Insère un nouveau client."""
        ...

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Récupère un client par son ID."""
        ...

    @abstractmethod
    def get_by_phone(self, phone: str) -> Optional[Customer]:
        """Récupère un client par téléphone (correspondance exacte)."""
        ...

    @abstractmethod
    def get_by_document(self, document: str) -> Optional[Customer]:
        """Récupère un client par document (correspondance exacte)."""
        ...

    @abstractmethod
    def exists(self, customer_id: str) -> bool:
        """Vérifie si un client existe."""
        ...


class IServiceOrderRepository(ABC):
    """
    Interface de stockage des ordres de service.

    Le stockage est propriétaire de la séquence des numéros d'ordre.
    """

    @abstractmethod
    def insert(self, order: ServiceOrder) -> tuple[str, int]:
        """
        Insère un ordre et lui attribue le prochain numéro séquentiel.

        Le numéro est aussi reporté sur l'entité via set_number().

        Retourne :
            Tuple (id, numéro généré)
        """
        ...

    @abstractmethod
    def get_by_id(self, order_id: str) -> Optional[ServiceOrder]:
        """Récupère un ordre par son ID."""
        ...

    @abstractmethod
    def update_status(
        self,
        order_id: str,
        status: ServiceOrderStatus,
        started_at: Optional[datetime],
        finished_at: Optional[datetime],
    ) -> None:
        """Persiste le statut et ses horodatages."""
        ...

    @abstractmethod
    def update_price(
        self,
        order_id: str,
        price: Decimal,
        currency: str,
        updated_at: datetime,
    ) -> None:
        """Persiste le prix, la devise et la date de modification."""
        ...

    @abstractmethod
    def list(
        self,
        customer_id: Optional[str] = None,
        status: Optional[ServiceOrderStatus] = None,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> list[ServiceOrder]:
        """
        Liste les ordres correspondant à tous les filtres fournis.

        Args :
            customer_id : Filtre optionnel par client
            status : Filtre optionnel par statut
            from_date : Date d'ouverture minimale (incluse)
            to_date : Date d'ouverture maximale (incluse)

        Retourne :
            Ordres triés par numéro décroissant
        """
        ...


class IAttachmentRepository(ABC):
    """Interface de stockage des métadonnées de pièces jointes."""

    @abstractmethod
    def insert(self, attachment: Attachment) -> None:
        """Insère une pièce jointe."""
        ...

    @abstractmethod
    def list_by_order(self, order_id: str) -> list[Attachment]:
        """Liste les pièces jointes d'un ordre, par date d'envoi croissante."""
        ...

    @abstractmethod
    def get_by_id(self, attachment_id: str) -> Optional[Attachment]:
        """Récupère une pièce jointe par son ID."""
        ...
