"""
Persistance SQLite de FilmDepot (SQLModel).

- database.py : engine et creation du schema
- models.py : tables et tables de liens plusieurs-a-plusieurs
- mappers.py : conversion modeles <-> entites
- repositories/ : implementations des ports repository
- unit_of_work.py : transaction regroupant les repositories

Usage:
    engine = create_db_engine("sqlite:///filmdepot.db")
    init_db(engine)
    uow = SQLModelUnitOfWork(Session(engine))
"""

from filmdepot.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
    open_session,
)

__all__ = ["create_db_engine", "init_db", "open_session"]
