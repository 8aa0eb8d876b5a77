"""
Service des ordres de service.

Orchestre l'ouverture, les changements de statut, la mise a jour du prix et
la recherche des ordres. Les regles du cycle de vie sont portees par l'entite
ServiceOrder ; ce service verifie l'existence des references et persiste
l'etat resultant.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from loguru import logger

from osservice.core.entities import ServiceOrder, ServiceOrderStatus
from osservice.core.errors import NotFoundError, ValidationError
from osservice.core.ports.repositories import ICustomerRepository, IServiceOrderRepository
from osservice.utils.helpers import to_naive_utc


class ServiceOrderService:
    """
    Service de gestion des ordres de service.

    Les erreurs de l'entite (InvalidTransitionError, MissingPriceError,
    InvalidStateError, ValidationError) sont propagees telles quelles.

    Example:
        service = ServiceOrderService(customer_repo=customers, order_repo=orders)
        order_id, number = service.open_order(customer_id, "Troca de tela")
        service.update_status(order_id, ServiceOrderStatus.IN_PROGRESS)
        service.update_price(order_id, Decimal("150.00"))
        service.update_status(order_id, ServiceOrderStatus.FINISHED)
    """

    def __init__(
        self,
        customer_repo: ICustomerRepository,
        order_repo: IServiceOrderRepository,
    ) -> None:
        """
        Initialise le service.

        Args:
            customer_repo: Repository des clients (verification d'existence)
            order_repo: Repository des ordres de service
        """
        self._customers = customer_repo
        self._orders = order_repo

    def open_order(self, customer_id: str, description: str) -> tuple[str, int]:
        """
        Ouvre un ordre de service pour un client existant.

        Returns:
            Tuple (id, numero sequentiel)

        Raises:
            NotFoundError: Si le client n'existe pas (rien n'est persiste)
            ValidationError: Si la description est invalide
        """
        logger.info(f"Ouverture d'un ordre de service pour le client {customer_id}")

        if not customer_id or not self._customers.exists(customer_id):
            logger.warning(f"Ouverture refusee : client introuvable ({customer_id})")
            raise NotFoundError("Client", customer_id)

        order = ServiceOrder.open(customer_id=customer_id, description=description)
        order_id, number = self._orders.insert(order)

        logger.info(f"Ordre de service ouvert : {order_id} (n° {number})")
        return order_id, number

    def get_order(self, order_id: str) -> ServiceOrder:
        """
        Recupere un ordre par son ID.

        Raises:
            NotFoundError: Si l'ordre n'existe pas
        """
        order = self._orders.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Ordre de service", order_id)
        return order

    def update_status(self, order_id: str, new_status: ServiceOrderStatus) -> ServiceOrder:
        """
        Applique un changement de statut et le persiste.

        Returns:
            L'ordre mis a jour

        Raises:
            NotFoundError: Si l'ordre n'existe pas
            InvalidTransitionError: Transition non autorisee
            MissingPriceError: Passage a FINISHED sans prix
        """
        order = self._load_for_update(order_id, "Changement de statut")
        current = order.status

        order.change_status(new_status)
        self._orders.update_status(
            order.id,
            order.status,
            order.started_at,
            order.finished_at,
        )

        logger.info(
            f"Statut de l'ordre {order_id} mis a jour : {current.value} -> {order.status.value}"
        )
        return order

    def update_price(
        self,
        order_id: str,
        price: Union[Decimal, int, float, str],
        currency: Optional[str] = None,
    ) -> ServiceOrder:
        """
        Met a jour le prix d'un ordre et le persiste.

        Returns:
            L'ordre mis a jour

        Raises:
            NotFoundError: Si l'ordre n'existe pas
            InvalidStateError: Si l'ordre est termine
            ValidationError: Si le prix est negatif ou hors de NUMERIC(18, 2)
        """
        order = self._load_for_update(order_id, "Mise a jour du prix")

        order.update_price(price, currency)
        self._orders.update_price(
            order.id,
            order.price,
            order.currency,
            order.price_updated_at,
        )

        logger.info(f"Prix de l'ordre {order_id} : {order.price} {order.currency}")
        return order

    def list_orders(
        self,
        customer_id: Optional[str] = None,
        status: Optional[ServiceOrderStatus] = None,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> list[ServiceOrder]:
        """
        Liste les ordres correspondant a tous les filtres fournis.

        Les filtres absents sont ignores. Tri par numero decroissant.

        Raises:
            ValidationError: Si from_date est posterieure a to_date
        """
        from_date = to_naive_utc(from_date)
        to_date = to_naive_utc(to_date)
        if from_date is not None and to_date is not None and from_date > to_date:
            raise ValidationError("from_date doit preceder to_date.", field="from_date")

        return self._orders.list(
            customer_id=customer_id,
            status=status,
            from_date=from_date,
            to_date=to_date,
        )

    def _load_for_update(self, order_id: str, action: str) -> ServiceOrder:
        order = self._orders.get_by_id(order_id)
        if order is None:
            logger.warning(f"{action} refuse : ordre introuvable ({order_id})")
            raise NotFoundError("Ordre de service", order_id)
        return order
