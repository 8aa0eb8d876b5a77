"""
Implementation SQLModel du repository ServiceOrder.

Implemente l'interface IServiceOrderRepository. Le numero sequentiel est
tire de la table sequences dans la meme transaction que l'insertion de
l'ordre ; l'index unique sur `number` garantit l'absence de doublon.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import update
from sqlmodel import Session, col, select

from osservice.core.entities import ServiceOrder, ServiceOrderStatus
from osservice.core.ports.repositories import IServiceOrderRepository
from osservice.infrastructure.persistence.models import SequenceModel, ServiceOrderModel
from osservice.infrastructure.persistence.repositories.codes import (
    STATUS_CODES,
    decode_status,
)
from osservice.utils.constants import ORDER_NUMBER_START

# Nom de la sequence des numeros d'ordre
ORDER_NUMBER_SEQUENCE = "service_orders"


class SQLModelServiceOrderRepository(IServiceOrderRepository):
    """
    Repository SQLModel pour les ordres de service.

    Implemente IServiceOrderRepository avec decodage explicite, champ par
    champ, entre ServiceOrderModel (persistance) et ServiceOrder (domaine).
    """

    def __init__(self, session: Session, number_start: int = ORDER_NUMBER_START) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
            number_start : Premier numero attribue si la sequence n'existe pas
        """
        self._session = session
        self._number_start = number_start

    def _to_entity(self, model: ServiceOrderModel) -> ServiceOrder:
        return ServiceOrder.reconstitute(
            id=model.id,
            number=model.number,
            customer_id=model.customer_id,
            description=model.description,
            status=decode_status(model.status),
            opened_at=model.opened_at,
            started_at=model.started_at,
            finished_at=model.finished_at,
            price=Decimal(model.price) if model.price is not None else None,
            currency=model.currency,
            price_updated_at=model.price_updated_at,
        )

    def _to_model(self, entity: ServiceOrder, number: int) -> ServiceOrderModel:
        return ServiceOrderModel(
            id=entity.id,
            number=number,
            customer_id=entity.customer_id,
            description=entity.description,
            status=STATUS_CODES[entity.status],
            opened_at=entity.opened_at,
            started_at=entity.started_at,
            finished_at=entity.finished_at,
            price=entity.price,
            currency=entity.currency,
            price_updated_at=entity.price_updated_at,
        )

    def _next_number(self) -> int:
        """
        Incremente la sequence et retourne la nouvelle valeur.

        Doit etre appele dans la transaction de l'insertion : l'UPDATE pose
        le verrou d'ecriture jusqu'au commit.
        """
        statement = (
            update(SequenceModel)
            .where(SequenceModel.name == ORDER_NUMBER_SEQUENCE)
            .values(value=SequenceModel.value + 1)
        )
        result = self._session.exec(statement)
        if result.rowcount == 0:
            self._session.add(
                SequenceModel(name=ORDER_NUMBER_SEQUENCE, value=self._number_start)
            )
            self._session.flush()
            return self._number_start

        value_statement = select(SequenceModel.value).where(
            SequenceModel.name == ORDER_NUMBER_SEQUENCE
        )
        return self._session.exec(value_statement).one()

    def _get_model(self, order_id: str) -> Optional[ServiceOrderModel]:
        return self._session.get(ServiceOrderModel, order_id)

    def insert(self, order: ServiceOrder) -> tuple[str, int]:
        """Insere un ordre et retourne (id, numero genere)."""
        try:
            number = self._next_number()
            self._session.add(self._to_model(order, number))
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        order.set_number(number)
        return order.id, number

    def get_by_id(self, order_id: str) -> Optional[ServiceOrder]:
        """Recupere un ordre par son ID."""
        model = self._get_model(order_id)
        if model:
            return self._to_entity(model)
        return None

    def update_status(
        self,
        order_id: str,
        status: ServiceOrderStatus,
        started_at: Optional[datetime],
        finished_at: Optional[datetime],
    ) -> None:
        """Persiste le statut et ses horodatages."""
        model = self._get_model(order_id)
        if model is None:
            return
        model.status = STATUS_CODES[status]
        model.started_at = started_at
        model.finished_at = finished_at
        self._session.add(model)
        self._session.commit()

    def update_price(
        self,
        order_id: str,
        price: Decimal,
        currency: str,
        updated_at: datetime,
    ) -> None:
        """Persiste le prix, la devise et la date de modification."""
        model = self._get_model(order_id)
        if model is None:
            return
        model.price = price
        model.currency = currency
        model.price_updated_at = updated_at
        self._session.add(model)
        self._session.commit()

    def list(
        self,
        customer_id: Optional[str] = None,
        status: Optional[ServiceOrderStatus] = None,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> list[ServiceOrder]:
        """Liste les ordres filtres, par numero decroissant."""
        statement = select(ServiceOrderModel)
        if customer_id is not None:
            statement = statement.where(ServiceOrderModel.customer_id == customer_id)
        if status is not None:
            statement = statement.where(ServiceOrderModel.status == STATUS_CODES[status])
        if from_date is not None:
            statement = statement.where(ServiceOrderModel.opened_at >= from_date)
        if to_date is not None:
            statement = statement.where(ServiceOrderModel.opened_at <= to_date)
        statement = statement.order_by(col(ServiceOrderModel.number).desc())

        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
