"""
Fixtures pytest partagees pour les tests OsService.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (repositories, stockage de fichiers)
- Settings de test avec chemins temporaires
- Engine SQLite en memoire et session associee
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from osservice.config import Settings
from osservice.core.entities import Customer, ServiceOrder
from osservice.core.ports.file_storage import IFileStorage
from osservice.core.ports.repositories import (
    IAttachmentRepository,
    ICustomerRepository,
    IServiceOrderRepository,
)
from osservice.infrastructure.persistence.database import create_db_engine, init_db


@pytest.fixture
def mock_customer_repo() -> MagicMock:
    """
    Mock de ICustomerRepository.

    Par defaut : aucun doublon, tous les clients existent.
    """
    mock = MagicMock(spec=ICustomerRepository)
    mock.get_by_id.return_value = None
    mock.get_by_phone.return_value = None
    mock.get_by_document.return_value = None
    mock.exists.return_value = True
    return mock


@pytest.fixture
def mock_order_repo() -> MagicMock:
    """
    Mock de IServiceOrderRepository.

    insert() retourne l'ID de l'ordre et le numero 1000.
    """
    mock = MagicMock(spec=IServiceOrderRepository)
    mock.insert.side_effect = lambda order: (order.id, 1000)
    mock.get_by_id.return_value = None
    mock.list.return_value = []
    return mock


@pytest.fixture
def mock_attachment_repo() -> MagicMock:
    """Mock de IAttachmentRepository."""
    mock = MagicMock(spec=IAttachmentRepository)
    mock.get_by_id.return_value = None
    mock.list_by_order.return_value = []
    return mock


@pytest.fixture
def mock_storage() -> MagicMock:
    """Mock de IFileStorage, toutes les operations reussissent."""
    mock = MagicMock(spec=IFileStorage)
    mock.delete.return_value = True
    mock.exists.return_value = True
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Base SQLite en memoire et pieces jointes sous tmp_path.
    """
    return Settings(
        database_url="sqlite://",
        uploads_dir=tmp_path / "uploads",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec toutes les tables creees."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def customer() -> Customer:
    """Client valide avec telephone et document."""
    return Customer.create(
        name="Maria Silva",
        phone="11999990000",
        email="maria@example.com",
        document="12345678900",
    )


@pytest.fixture
def open_order(customer: Customer) -> ServiceOrder:
    """Ordre de service OPEN, sans prix, deja numerote."""
    order = ServiceOrder.open(customer_id=customer.id, description="Troca de tela")
    order.set_number(1000)
    return order
