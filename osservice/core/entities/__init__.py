"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- Customer: Customer registered by the workshop
- ServiceOrder: Service order with its status state machine and pricing rules
- ServiceOrderStatus: OPEN, IN_PROGRESS, FINISHED
- Attachment: Before/after photo metadata
- AttachmentType: BEFORE, AFTER
"""

from osservice.core.entities.attachment import Attachment, AttachmentType
from osservice.core.entities.customer import Customer
from osservice.core.entities.service_order import ServiceOrder, ServiceOrderStatus

__all__ = [
    "Attachment",
    "AttachmentType",
    "Customer",
    "ServiceOrder",
    "ServiceOrderStatus",
]
