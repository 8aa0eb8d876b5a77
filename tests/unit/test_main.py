"""
Tests unitaires pour les commandes CLI.

Le Container du module CLI est remplace par un Container de test
(SQLite en memoire) pour chaque test.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest
from dependency_injector import providers
from rich.console import Console
from typer.testing import CliRunner

from osservice import __version__
from osservice.container import Container
from osservice.core.entities import ServiceOrderStatus
from osservice.main import app

runner = CliRunner()


@pytest.fixture
def test_container(test_settings):
    container = Container()
    container.config.override(providers.Object(test_settings))
    # Console large : les tableaux rich ne sont pas tronques
    with patch("osservice.main.container", container), patch(
        "osservice.main.console", Console(width=200)
    ):
        yield container


@pytest.fixture
def seeded(test_container):
    """Deux ordres : un ouvert et un termine."""
    test_container.database.init()
    customer_id = test_container.customer_service().create_customer("Maria Silva")
    orders = test_container.service_order_service()
    open_id, _ = orders.open_order(customer_id, "Troca de tela")
    done_id, _ = orders.open_order(customer_id, "Bateria")
    orders.update_status(done_id, ServiceOrderStatus.IN_PROGRESS)
    orders.update_price(done_id, Decimal("99.90"))
    orders.update_status(done_id, ServiceOrderStatus.FINISHED)
    return customer_id


class TestCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_info(self, test_container, test_settings):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "sqlite://" in result.stdout
        assert "1000" in result.stdout

    def test_init_db(self, test_container):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert "Base initialisée" in result.stdout

    def test_list_orders_empty(self, test_container):
        result = runner.invoke(app, ["list-orders"])

        assert result.exit_code == 0
        assert "Aucun ordre de service" in result.stdout

    def test_list_orders(self, seeded):
        result = runner.invoke(app, ["list-orders"])

        assert result.exit_code == 0
        assert "1000" in result.stdout
        assert "1001" in result.stdout

    def test_list_orders_by_status(self, seeded):
        result = runner.invoke(app, ["list-orders", "--status", "finished"])

        assert result.exit_code == 0
        assert "1001" in result.stdout
        assert "99.90" in result.stdout
        assert "Troca de tela" not in result.stdout

    def test_list_orders_unknown_customer(self, seeded):
        result = runner.invoke(app, ["list-orders", "--customer", "nobody"])

        assert result.exit_code == 0
        assert "Aucun ordre de service" in result.stdout

    def test_list_orders_invalid_status(self, test_container):
        result = runner.invoke(app, ["list-orders", "--status", "cancelled"])
        assert result.exit_code != 0

    def test_serve_builds_app_through_factory(self, test_container):
        with patch("uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("osservice.web.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9000

    def test_web_module_builds_no_app_at_import(self):
        import osservice.web.app as web_app

        assert not hasattr(web_app, "app")
