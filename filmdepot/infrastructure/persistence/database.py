"""
Engine SQLModel et creation du schema.

L'engine est construit par le container a partir de FILMDEPOT_DATABASE_URL ;
les tests passent leur propre engine SQLite en memoire a init_db().
"""

from collections.abc import Iterator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

_SQLITE_FILE_PREFIX = "sqlite:///"


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine de la base.

    Pour une base SQLite sur fichier, le repertoire du fichier est cree.
    """
    if database_url.startswith(_SQLITE_FILE_PREFIX) and ":memory:" not in database_url:
        Path(database_url[len(_SQLITE_FILE_PREFIX):]).parent.mkdir(parents=True, exist_ok=True)

    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions partagees entre les taches du linker
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Cree les tables manquantes (rips, visites, films et tables de liens)."""
    from filmdepot.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug(f"Schema verifie sur {engine.url}")


def open_session(engine: Engine) -> Iterator[Session]:
    """
    Session SQLModel fermee a la sortie du generateur.

    Utilisation :
        container.session()  # via providers.Resource
        container.shutdown_resources()  # ferme la session
    """
    with Session(engine) as session:
        yield session
