"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Inclut les repositories SQLModel, le stockage des fichiers et les services.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.file_storage import LocalFileStorage
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelAttachmentRepository,
    SQLModelCustomerRepository,
    SQLModelServiceOrderRepository,
)
from .services.attachments import AttachmentService
from .services.customers import CustomerService
from .services.service_orders import ServiceOrderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        service = container.service_order_service()
        order_id, number = service.open_order(customer_id, "Troca de tela")

    En test, la configuration se remplace par :
        container.config.override(providers.Object(test_settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage par toutes les sessions
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        timeout=config.provided.database_timeout,
    )

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Session - nouvelle session a chaque appel
    session = providers.Factory(Session, bind=engine)

    # Repositories - Factory pour nouvelle instance avec session fraiche
    customer_repository = providers.Factory(
        SQLModelCustomerRepository,
        session=session,
    )
    service_order_repository = providers.Factory(
        SQLModelServiceOrderRepository,
        session=session,
        number_start=config.provided.order_number_start,
    )
    attachment_repository = providers.Factory(
        SQLModelAttachmentRepository,
        session=session,
    )

    # Stockage des pieces jointes (stateless - Singleton)
    file_storage = providers.Singleton(
        LocalFileStorage,
        root_dir=config.provided.uploads_dir,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    customer_service = providers.Factory(
        CustomerService,
        customer_repo=customer_repository,
    )
    service_order_service = providers.Factory(
        ServiceOrderService,
        customer_repo=customer_repository,
        order_repo=service_order_repository,
    )
    attachment_service = providers.Factory(
        AttachmentService,
        order_repo=service_order_repository,
        attachment_repo=attachment_repository,
        storage=file_storage,
    )
