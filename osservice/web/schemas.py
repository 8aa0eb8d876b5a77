"""
Schemas Pydantic de l'API JSON.

Les schemas d'entree ne portent pas les regles metier (longueurs, format
d'email, prix positif) : elles restent dans les entites, qui levent les
erreurs traduites par web/errors.py.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..core.entities import AttachmentType, ServiceOrderStatus


class CustomerCreate(BaseModel):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    document: Optional[str] = None


class CustomerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    document: Optional[str] = None
    created_at: datetime


class CreatedId(BaseModel):
    id: str


class ServiceOrderCreate(BaseModel):
    customer_id: str
    description: str


class ServiceOrderCreated(BaseModel):
    id: str
    number: int


class ServiceOrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    number: int
    customer_id: str
    description: str
    status: ServiceOrderStatus
    opened_at: datetime
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    price_updated_at: Optional[datetime] = None


class StatusUpdate(BaseModel):
    status: ServiceOrderStatus


class PriceUpdate(BaseModel):
    price: Decimal
    currency: Optional[str] = None


class AttachmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    service_order_id: str
    type: AttachmentType
    file_name: str
    content_type: str
    size_bytes: int
    uploaded_at: datetime


class AttachmentCreated(BaseModel):
    attachment_id: str


class ErrorOut(BaseModel):
    error: str
    detail: str
    field: Optional[str] = None
