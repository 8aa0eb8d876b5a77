"""
Implementation SQLModel du repository Customer.

Implemente l'interface ICustomerRepository pour la persistance des clients
via SQLModel. Les violations d'index unique (telephone, document) levees par
la base sont traduites en DuplicateError, comme la pre-verification du service.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from osservice.core.entities import Customer
from osservice.core.errors import DuplicateError
from osservice.core.ports.repositories import ICustomerRepository
from osservice.infrastructure.persistence.models import CustomerModel

# Champs uniques, dans l'ordre de priorite du rapport d'erreur
_UNIQUE_FIELDS = ("document", "phone")


def duplicate_field(error: IntegrityError) -> Optional[str]:
    """
    Identifie le champ unique en cause dans une IntegrityError.

    SQLite : "UNIQUE constraint failed: customers.document"
    PostgreSQL : nom de l'index, ex. "ix_customers_document"
    """
    message = str(error.orig).lower()
    for field in _UNIQUE_FIELDS:
        if f"customers.{field}" in message or f"ix_customers_{field}" in message:
            return field
    return None


class SQLModelCustomerRepository(ICustomerRepository):
    """
    Repository SQLModel pour les clients.

    Implemente ICustomerRepository avec conversion explicite
    entre l'entite Customer (domaine) et CustomerModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: CustomerModel) -> Customer:
        return Customer.reconstitute(
            id=model.id,
            name=model.name,
            phone=model.phone,
            email=model.email,
            document=model.document,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Customer) -> CustomerModel:
        return CustomerModel(
            id=entity.id,
            name=entity.name,
            phone=entity.phone,
            email=entity.email,
            document=entity.document,
            created_at=entity.created_at,
        )

    def insert(self, customer: Customer) -> None:
        """
        Insere un nouveau client.

        Raises:
            DuplicateError: Si le document ou le telephone est deja utilise
        """
        self._session.add(self._to_model(customer))
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            field = duplicate_field(e)
            if field is None:
                raise
            raise DuplicateError(field) from e

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Recupere un client par son ID."""
        model = self._session.get(CustomerModel, customer_id)
        if model:
            return self._to_entity(model)
        return None

    def get_by_phone(self, phone: str) -> Optional[Customer]:
        """Recupere un client par telephone."""
        statement = select(CustomerModel).where(CustomerModel.phone == phone)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def get_by_document(self, document: str) -> Optional[Customer]:
        """Recupere un client par document."""
        statement = select(CustomerModel).where(CustomerModel.document == document)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def exists(self, customer_id: str) -> bool:
        """Verifie si un client existe."""
        statement = select(CustomerModel.id).where(CustomerModel.id == customer_id)
        return self._session.exec(statement).first() is not None
