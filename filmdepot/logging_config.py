"""
Logging de FilmDepot via loguru.

La console affiche les messages au niveau demande pendant une commande ;
le fichier conserve tout le detail (DEBUG, dont les appels TMDB) en JSON,
une ligne par evenement, pour relire un linking ou une visite apres coup.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def _is_filmdepot_record(record: dict) -> bool:
    """Garde les evenements emis par le paquet (pas ceux des dependances)."""
    return record["name"] is not None and record["name"].startswith("filmdepot")


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/filmdepot.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les sinks loguru par la console et le journal JSON.

    Args :
        log_level : Niveau de la console
        log_file : Journal JSON, son repertoire est cree au besoin
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre de journaux archives conserves
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        filter=_is_filmdepot_record,
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug(f"Journal {log_file} (niveau console {log_level})")
