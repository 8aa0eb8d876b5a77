"""
Tests unitaires pour ServiceOrderService.

Tests couvrant:
- open_order: verification du client et numerotation
- update_status / update_price: chargement, regles de l'entite, persistance
- list_orders: transmission des filtres et controle des dates
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from osservice.core.entities import ServiceOrderStatus
from osservice.core.errors import (
    InvalidStateError,
    InvalidTransitionError,
    MissingPriceError,
    NotFoundError,
    ValidationError,
)
from osservice.services.service_orders import ServiceOrderService


@pytest.fixture
def service(mock_customer_repo, mock_order_repo) -> ServiceOrderService:
    return ServiceOrderService(customer_repo=mock_customer_repo, order_repo=mock_order_repo)


class TestOpenOrder:
    """Tests pour open_order()."""

    def test_open_returns_id_and_number(self, service, mock_order_repo):
        order_id, number = service.open_order("customer-1", "Troca de tela")

        assert number == 1000
        inserted = mock_order_repo.insert.call_args.args[0]
        assert inserted.id == order_id
        assert inserted.status is ServiceOrderStatus.OPEN
        assert inserted.customer_id == "customer-1"

    def test_unknown_customer(self, service, mock_customer_repo, mock_order_repo):
        mock_customer_repo.exists.return_value = False

        with pytest.raises(NotFoundError):
            service.open_order("missing", "Troca de tela")

        mock_order_repo.insert.assert_not_called()

    def test_invalid_description(self, service, mock_order_repo):
        with pytest.raises(ValidationError):
            service.open_order("customer-1", "   ")
        mock_order_repo.insert.assert_not_called()


class TestUpdateStatus:
    """Tests pour update_status()."""

    def test_start_persists_status(self, service, mock_order_repo, open_order):
        mock_order_repo.get_by_id.return_value = open_order

        result = service.update_status(open_order.id, ServiceOrderStatus.IN_PROGRESS)

        assert result.status is ServiceOrderStatus.IN_PROGRESS
        mock_order_repo.update_status.assert_called_once_with(
            open_order.id,
            ServiceOrderStatus.IN_PROGRESS,
            result.started_at,
            None,
        )

    def test_not_found(self, service, mock_order_repo):
        with pytest.raises(NotFoundError):
            service.update_status("missing", ServiceOrderStatus.IN_PROGRESS)
        mock_order_repo.update_status.assert_not_called()

    def test_invalid_transition_not_persisted(self, service, mock_order_repo, open_order):
        mock_order_repo.get_by_id.return_value = open_order

        with pytest.raises(InvalidTransitionError):
            service.update_status(open_order.id, ServiceOrderStatus.FINISHED)

        mock_order_repo.update_status.assert_not_called()

    def test_finish_without_price(self, service, mock_order_repo, open_order):
        open_order.start()
        mock_order_repo.get_by_id.return_value = open_order

        with pytest.raises(MissingPriceError):
            service.update_status(open_order.id, ServiceOrderStatus.FINISHED)

        mock_order_repo.update_status.assert_not_called()

    def test_finish_with_price(self, service, mock_order_repo, open_order):
        open_order.start()
        open_order.update_price(Decimal("150"))
        mock_order_repo.get_by_id.return_value = open_order

        result = service.update_status(open_order.id, ServiceOrderStatus.FINISHED)

        assert result.is_finished
        assert result.finished_at is not None


class TestUpdatePrice:
    """Tests pour update_price()."""

    def test_update_persists_price(self, service, mock_order_repo, open_order):
        mock_order_repo.get_by_id.return_value = open_order

        result = service.update_price(open_order.id, "150.50", "usd")

        assert result.price == Decimal("150.50")
        mock_order_repo.update_price.assert_called_once_with(
            open_order.id,
            Decimal("150.50"),
            "USD",
            result.price_updated_at,
        )

    def test_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.update_price("missing", 10)

    def test_negative_price(self, service, mock_order_repo, open_order):
        mock_order_repo.get_by_id.return_value = open_order

        with pytest.raises(ValidationError):
            service.update_price(open_order.id, -1)

        mock_order_repo.update_price.assert_not_called()

    def test_finished_order(self, service, mock_order_repo, open_order):
        open_order.start()
        open_order.update_price(10)
        open_order.finish()
        mock_order_repo.get_by_id.return_value = open_order

        with pytest.raises(InvalidStateError):
            service.update_price(open_order.id, 20)

        mock_order_repo.update_price.assert_not_called()


class TestListOrders:
    """Tests pour list_orders() et get_order()."""

    def test_filters_forwarded(self, service, mock_order_repo):
        start = datetime(2024, 1, 1)
        end = datetime(2024, 2, 1)

        service.list_orders("customer-1", ServiceOrderStatus.OPEN, start, end)

        mock_order_repo.list.assert_called_once_with(
            customer_id="customer-1",
            status=ServiceOrderStatus.OPEN,
            from_date=start,
            to_date=end,
        )

    def test_aware_dates_normalized_to_utc(self, service, mock_order_repo):
        brt = timezone(timedelta(hours=-3))

        service.list_orders(from_date=datetime(2024, 1, 1, 21, 0, tzinfo=brt))

        kwargs = mock_order_repo.list.call_args.kwargs
        assert kwargs["from_date"] == datetime(2024, 1, 2, 0, 0)
        assert kwargs["from_date"].tzinfo is None

    def test_inverted_range_rejected(self, service, mock_order_repo):
        with pytest.raises(ValidationError):
            service.list_orders(from_date=datetime(2024, 2, 1), to_date=datetime(2024, 1, 1))
        mock_order_repo.list.assert_not_called()

    def test_get_order_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.get_order("missing")

    def test_get_order(self, service, mock_order_repo, open_order):
        mock_order_repo.get_by_id.return_value = open_order
        assert service.get_order(open_order.id) is open_order
