"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : colorée pour le terminal, ou JSON pour les conteneurs
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/osservice.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    json_console: bool = False,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log, None pour désactiver le fichier
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
        json_console : Sérialise aussi la sortie console en JSON
    """
    logger.remove()

    if json_console:
        logger.add(sys.stderr, level=log_level, format="{message}", serialize=True)
    else:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,  # Thread-safe
        )

    logger.debug("Logging configuré", log_file=str(log_file), json_console=json_console)
