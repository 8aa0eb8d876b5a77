"""
Modeles SQLModel pour la base de donnees OsService.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- customers: Clients (index uniques sur phone et document, NULL autorise)
- service_orders: Ordres de service (numero sequentiel unique)
- service_order_attachments: Metadonnees des photos avant/apres
- sequences: Compteurs geres par la couche de persistance

Les enums sont stockes en entier :
- status : 0=open, 1=in_progress, 2=finished
- attachment_type : 0=before, 1=after

Les dates sont stockees en UTC naif, dans des colonnes DateTime sans fuseau.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Index, SQLModel

from osservice.utils.constants import (
    DEFAULT_CURRENCY,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)


class CustomerModel(SQLModel, table=True):
    """Modele representant un client dans la base de donnees."""

    __tablename__ = "customers"
    __table_args__ = (
        Index("ix_customers_phone", "phone", unique=True),
        Index("ix_customers_document", "document", unique=True),
    )

    id: str = Field(primary_key=True, max_length=36)
    name: str = Field(max_length=150)
    phone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=120)
    document: Optional[str] = Field(default=None, max_length=30)
    created_at: datetime = Field(sa_type=DateTime)


class ServiceOrderModel(SQLModel, table=True):
    """
    Modele representant un ordre de service.

    Le numero est attribue depuis la table sequences au moment de l'insertion.
    """

    __tablename__ = "service_orders"
    __table_args__ = (
        Index("ix_service_orders_customer_status", "customer_id", "status"),
        Index("ix_service_orders_status_opened_at", "status", "opened_at"),
    )

    id: str = Field(primary_key=True, max_length=36)
    number: int = Field(unique=True, index=True)
    customer_id: str = Field(foreign_key="customers.id", index=True, max_length=36)
    description: str = Field(max_length=500)
    status: int = Field(default=0, index=True)
    opened_at: datetime = Field(index=True, sa_type=DateTime)
    started_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
    finished_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
    price: Optional[Decimal] = Field(
        default=None, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    currency: Optional[str] = Field(default=DEFAULT_CURRENCY, max_length=3)
    price_updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime)


class AttachmentModel(SQLModel, table=True):
    """Modele representant une piece jointe (photo avant/apres)."""

    __tablename__ = "service_order_attachments"
    __table_args__ = (
        Index("ix_attachments_order_type", "service_order_id", "attachment_type"),
    )

    id: str = Field(primary_key=True, max_length=36)
    service_order_id: str = Field(foreign_key="service_orders.id", index=True, max_length=36)
    attachment_type: int
    file_name: str = Field(max_length=255)
    content_type: str = Field(max_length=100)
    file_size_bytes: int
    storage_path: str = Field(max_length=500)
    uploaded_at: datetime = Field(sa_type=DateTime)


class SequenceModel(SQLModel, table=True):
    """
    Compteur nomme (ex: numeros d'ordres de service).

    `value` contient la derniere valeur attribuee.
    """

    __tablename__ = "sequences"

    name: str = Field(primary_key=True, max_length=50)
    value: int
