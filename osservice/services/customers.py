"""
Service client orchestrant la creation et la recherche des clients.

Responsabilites:
- Pre-verification d'unicite du document puis du telephone
- Creation via la fabrique validante de l'entite
- Lecture par ID et recherche par telephone ou document
"""

from typing import Optional

from loguru import logger

from osservice.core.entities import Customer
from osservice.core.errors import DuplicateError, NotFoundError, ValidationError
from osservice.core.ports.repositories import ICustomerRepository
from osservice.utils.helpers import clean_optional


class CustomerService:
    """
    Service de gestion des clients.

    La pre-verification d'unicite donne une erreur rapide et lisible ;
    l'index unique de la base reste la garantie finale (le repository
    traduit sa violation en DuplicateError).

    Example:
        service = CustomerService(customer_repo=repo)
        customer_id = service.create_customer("Maria Silva", phone="11999990000")
    """

    def __init__(self, customer_repo: ICustomerRepository) -> None:
        """
        Initialise le service client.

        Args:
            customer_repo: Repository pour la persistance des clients
        """
        self._customers = customer_repo

    def create_customer(
        self,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        document: Optional[str] = None,
    ) -> str:
        """
        Cree un client apres verification d'unicite.

        Le document est verifie avant le telephone : un doublon de document
        est signale meme si le telephone est lui aussi deja utilise.

        Returns:
            L'ID du client cree

        Raises:
            DuplicateError: Document ou telephone deja utilise
            ValidationError: Champ invalide
        """
        logger.info(f"Creation du client {name!r}")

        document_key = clean_optional(document)
        if document_key is not None and self._customers.get_by_document(document_key):
            logger.warning(f"Creation refusee : document en doublon ({document_key})")
            raise DuplicateError("document")

        phone_key = clean_optional(phone)
        if phone_key is not None and self._customers.get_by_phone(phone_key):
            logger.warning(f"Creation refusee : telephone en doublon ({phone_key})")
            raise DuplicateError("phone")

        customer = Customer.create(name=name, phone=phone, email=email, document=document)
        self._customers.insert(customer)

        logger.info(f"Client cree : {customer.id} ({customer.name})")
        return customer.id

    def get_customer(self, customer_id: str) -> Customer:
        """
        Recupere un client par son ID.

        Raises:
            NotFoundError: Si le client n'existe pas
        """
        customer = self._customers.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Client", customer_id)
        return customer

    def find_customer(
        self,
        phone: Optional[str] = None,
        document: Optional[str] = None,
    ) -> Customer:
        """
        Recherche un client par telephone, puis par document.

        Raises:
            ValidationError: Si aucun critere n'est fourni
            NotFoundError: Si aucun client ne correspond
        """
        phone = clean_optional(phone)
        document = clean_optional(document)
        if phone is None and document is None:
            raise ValidationError("Le telephone ou le document doit etre fourni.")

        if phone is not None:
            customer = self._customers.get_by_phone(phone)
            if customer is not None:
                return customer

        if document is not None:
            customer = self._customers.get_by_document(document)
            if customer is not None:
                return customer

        raise NotFoundError("Client")
