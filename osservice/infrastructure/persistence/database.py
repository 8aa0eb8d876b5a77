"""
Configuration de la base de donnees pour OsService.

Ce module fournit :
- Creation de l'engine (SQLite par defaut) avec timeout de connexion
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via OSSERVICE_DATABASE_URL (defaut: sqlite:///data/osservice.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _is_memory_url(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str, timeout: float = 15.0) -> Engine:
    """
    Cree un engine SQLModel pour l'URL donnee.

    Pour SQLite :
    - cree le repertoire parent du fichier si necessaire
    - applique `timeout` comme delai d'attente des verrous
    - active les cles etrangeres (desactivees par defaut dans SQLite)
    - partage une connexion unique pour les bases en memoire
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False, pool_pre_ping=True)

    kwargs: dict = {
        "echo": False,
        "connect_args": {"check_same_thread": False, "timeout": timeout},
    }
    if _is_memory_url(database_url):
        kwargs["poolclass"] = StaticPool
    elif database_url.startswith("sqlite:///"):
        db_path = Path(database_url.replace("sqlite:///", "", 1))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(database_url, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine global, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from osservice.config import Settings

        settings = Settings()
        _engine = create_db_engine(settings.database_url, settings.database_timeout)
    return _engine


def get_session(engine: Optional[Engine] = None) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() ou dans une boucle for :
        session = next(get_session())

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(engine or get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from osservice.infrastructure.persistence import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    logger.debug(f"Tables initialisees sur {engine.url.render_as_string(hide_password=True)}")
