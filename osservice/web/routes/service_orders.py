"""
Routes des ordres de service.

Ouverture, consultation, changement de statut, prix, et gestion des photos
avant/apres. Les erreurs metier sont traduites par web/errors.py.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi import status as http_status
from fastapi.responses import FileResponse

from ...core.entities import AttachmentType, ServiceOrderStatus
from ...utils.constants import MAX_FILE_SIZE_BYTES
from ..schemas import (
    AttachmentCreated,
    AttachmentOut,
    PriceUpdate,
    ServiceOrderCreate,
    ServiceOrderCreated,
    ServiceOrderOut,
    StatusUpdate,
)

router = APIRouter(prefix="/v1/service-orders", tags=["service-orders"])


@router.get("", response_model=list[ServiceOrderOut])
async def list_service_orders(
    request: Request,
    customer_id: Optional[str] = None,
    status: Optional[ServiceOrderStatus] = None,
    from_date: Optional[datetime] = None,
    to_date: Optional[datetime] = None,
):
    """Liste les ordres filtres, du plus recent au plus ancien."""
    service = request.app.state.container.service_order_service()
    orders = service.list_orders(
        customer_id=customer_id,
        status=status,
        from_date=from_date,
        to_date=to_date,
    )
    return [ServiceOrderOut.model_validate(order) for order in orders]


@router.post("", response_model=ServiceOrderCreated, status_code=http_status.HTTP_201_CREATED)
async def open_service_order(request: Request, payload: ServiceOrderCreate):
    """Ouvre un ordre de service (404 si le client n'existe pas)."""
    service = request.app.state.container.service_order_service()
    order_id, number = service.open_order(payload.customer_id, payload.description)
    return ServiceOrderCreated(id=order_id, number=number)


@router.get("/attachments/{attachment_id}/download")
async def download_attachment(request: Request, attachment_id: str):
    """Telecharge le contenu d'une piece jointe."""
    service = request.app.state.container.attachment_service()
    attachment, path = service.open_attachment(attachment_id)
    return FileResponse(
        path,
        media_type=attachment.content_type,
        filename=attachment.file_name,
    )


@router.get("/{order_id}", response_model=ServiceOrderOut)
async def get_service_order(request: Request, order_id: str):
    """Detail d'un ordre de service."""
    service = request.app.state.container.service_order_service()
    return ServiceOrderOut.model_validate(service.get_order(order_id))


@router.patch("/{order_id}/status", response_model=ServiceOrderOut)
async def update_status(request: Request, order_id: str, payload: StatusUpdate):
    """Fait avancer le statut (409 si la transition est refusee)."""
    service = request.app.state.container.service_order_service()
    order = service.update_status(order_id, payload.status)
    return ServiceOrderOut.model_validate(order)


@router.put("/{order_id}/price", response_model=ServiceOrderOut)
async def update_price(request: Request, order_id: str, payload: PriceUpdate):
    """Met a jour le prix (409 si l'ordre est termine)."""
    service = request.app.state.container.service_order_service()
    order = service.update_price(order_id, payload.price, payload.currency)
    return ServiceOrderOut.model_validate(order)


@router.post(
    "/{order_id}/attachments/{attachment_type}",
    response_model=AttachmentCreated,
    status_code=http_status.HTTP_201_CREATED,
)
async def upload_attachment(
    request: Request,
    order_id: str,
    attachment_type: AttachmentType,
    file: UploadFile = File(...),
):
    """Envoie une photo avant ou apres intervention."""
    # Lecture bornee : un octet de plus que la limite suffit a la refuser
    data = await file.read(MAX_FILE_SIZE_BYTES + 1)
    size_bytes = file.size if file.size is not None else len(data)

    service = request.app.state.container.attachment_service()
    attachment_id = service.upload(
        order_id=order_id,
        attachment_type=attachment_type,
        file_name=file.filename or "",
        content_type=file.content_type or "",
        size_bytes=size_bytes,
        data=data,
    )
    return AttachmentCreated(attachment_id=attachment_id)


@router.get("/{order_id}/attachments", response_model=list[AttachmentOut])
async def list_attachments(request: Request, order_id: str):
    """Liste les photos d'un ordre, par date d'envoi."""
    service = request.app.state.container.attachment_service()
    return [AttachmentOut.model_validate(a) for a in service.list_attachments(order_id)]
