"""
Routes des clients.

Creation, lecture par ID et recherche par telephone ou document.
"""

from typing import Optional

from fastapi import APIRouter, Request, status

from ..schemas import CreatedId, CustomerCreate, CustomerOut

router = APIRouter(prefix="/v1/customers", tags=["customers"])


@router.post("", response_model=CreatedId, status_code=status.HTTP_201_CREATED)
async def create_customer(request: Request, payload: CustomerCreate):
    """Cree un client (409 si le document ou le telephone existe deja)."""
    service = request.app.state.container.customer_service()
    customer_id = service.create_customer(
        name=payload.name,
        phone=payload.phone,
        email=payload.email,
        document=payload.document,
    )
    return CreatedId(id=customer_id)


@router.get("/search", response_model=CustomerOut)
async def search_customer(
    request: Request,
    phone: Optional[str] = None,
    document: Optional[str] = None,
):
    """Recherche un client par telephone puis par document."""
    service = request.app.state.container.customer_service()
    customer = service.find_customer(phone=phone, document=document)
    return CustomerOut.model_validate(customer)


@router.get("/{customer_id}", response_model=CustomerOut)
async def get_customer(request: Request, customer_id: str):
    """Detail d'un client."""
    service = request.app.state.container.customer_service()
    return CustomerOut.model_validate(service.get_customer(customer_id))
