"""
Point d'entrée CLI d'OsService.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .core.entities import ServiceOrderStatus
from .logging_config import configure_logging

app = typer.Typer(
    name="osservice",
    help="Gestion des ordres de service de l'atelier",
)
container = Container()
console = Console()

# Libellés affichés pour chaque statut
STATUS_LABELS = {
    ServiceOrderStatus.OPEN: "[yellow]ouvert[/yellow]",
    ServiceOrderStatus.IN_PROGRESS: "[cyan]en cours[/cyan]",
    ServiceOrderStatus.FINISHED: "[green]terminé[/green]",
}


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration OsService")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Pièces jointes : {config.uploads_dir}")
    typer.echo(f"Premier numéro d'ordre : {config.order_number_start}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"OsService v{__version__}")


@app.command(name="init-db")
def init_db() -> None:
    """Crée les tables de la base de données si nécessaire."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command(name="list-orders")
def list_orders(
    customer: Annotated[
        Optional[str], typer.Option("--customer", "-c", help="ID du client")
    ] = None,
    status: Annotated[
        Optional[ServiceOrderStatus], typer.Option("--status", "-s", help="Statut")
    ] = None,
) -> None:
    """Liste les ordres de service, du plus récent au plus ancien."""
    container.database.init()
    service = container.service_order_service()
    orders = service.list_orders(customer_id=customer, status=status)

    if not orders:
        console.print("Aucun ordre de service.")
        return

    table = Table(title=f"Ordres de service ({len(orders)})")
    table.add_column("N°", justify="right")
    table.add_column("Client")
    table.add_column("Statut")
    table.add_column("Prix", justify="right")
    table.add_column("Ouvert le")
    table.add_column("Description")

    for order in orders:
        price = f"{order.price} {order.currency}" if order.price is not None else "-"
        table.add_row(
            str(order.number),
            order.customer_id,
            STATUS_LABELS[order.status],
            price,
            order.opened_at.strftime("%Y-%m-%d %H:%M") if order.opened_at else "-",
            order.description,
        )

    console.print(table)


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface réseau")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port HTTP")] = 8000,
    reload: Annotated[bool, typer.Option(help="Recharge le code modifié (développement)")] = False,
) -> None:
    """Lance l'API JSON OsService avec uvicorn."""
    import uvicorn

    config = get_config()
    typer.echo(f"API OsService sur http://{host}:{port} (base : {config.database_url})")
    uvicorn.run(
        "osservice.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=config.log_level.lower(),
        log_config=None,
    )


def main() -> None:
    """Point d'entrée du script `osservice`."""
    settings = get_config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        json_console=settings.log_json,
    )

    logger.info("Démarrage d'OsService", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
