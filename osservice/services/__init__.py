"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They check cross-entity rules (existence, uniqueness), call entity methods
that enforce invariants, and persist the resulting state.

This layer contains:
- CustomerService: customer creation with uniqueness pre-checks
- ServiceOrderService: opening, status changes, pricing, listing
- AttachmentService: before/after photo upload and retrieval

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/ or adapters/.
"""

from osservice.services.attachments import AttachmentService
from osservice.services.customers import CustomerService
from osservice.services.service_orders import ServiceOrderService

__all__ = [
    "AttachmentService",
    "CustomerService",
    "ServiceOrderService",
]
