"""
Fixtures pytest partagees pour les tests FilmDepot.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (client API, unite de travail et repositories)
- Base SQLite en memoire et unite de travail SQLModel associee
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from filmdepot.config import Settings
from filmdepot.core.ports.api_clients import IMovieAPIClient
from filmdepot.core.ports.repositories import (
    ICastMemberRepository,
    IDirectorRepository,
    IGenreRepository,
    IMovieRepository,
    IMovieRipRepository,
    IMovieWarehouseVisitRepository,
    IUnitOfWork,
)
from filmdepot.infrastructure.persistence.database import init_db
from filmdepot.infrastructure.persistence.unit_of_work import SQLModelUnitOfWork


@pytest.fixture
def mock_api_client() -> AsyncMock:
    """
    Mock de IMovieAPIClient.

    Par defaut la recherche ne retourne rien et les IDs sont inconnus.
    """
    client = AsyncMock(spec=IMovieAPIClient)
    client.search_movie.return_value = []
    client.get_movie_info.return_value = None
    return client


@pytest.fixture
def mock_uow() -> MagicMock:
    """
    Mock de IUnitOfWork avec un mock par repository.

    save() retourne l'entite recue, les listes sont vides par defaut.
    """
    uow = MagicMock(spec=IUnitOfWork)
    uow.movies = MagicMock(spec=IMovieRepository)
    uow.movie_rips = MagicMock(spec=IMovieRipRepository)
    uow.visits = MagicMock(spec=IMovieWarehouseVisitRepository)
    uow.genres = MagicMock(spec=IGenreRepository)
    uow.cast_members = MagicMock(spec=ICastMemberRepository)
    uow.directors = MagicMock(spec=IDirectorRepository)

    uow.movies.find_by_external_id.return_value = None
    uow.movies.save.side_effect = lambda movie: movie
    uow.movie_rips.save.side_effect = lambda movie_rip: movie_rip
    uow.movie_rips.get_unlinked.return_value = []
    uow.movie_rips.find_by_file_name.return_value = None
    uow.visits.get_by_datetime.return_value = None
    uow.visits.add.side_effect = lambda visit: visit
    for repository in (uow.genres, uow.cast_members, uow.directors):
        repository.find_by_external_id.return_value = None
    return uow


@pytest.fixture
def session() -> Iterator[Session]:
    """Session sur une base SQLite en memoire, tables creees."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def uow(session: Session) -> SQLModelUnitOfWork:
    """Unite de travail SQLModel sur la base en memoire."""
    return SQLModelUnitOfWork(session)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler l'entrepot, les fichiers de
    contenu et la base de chaque test.
    """
    warehouse_dir = tmp_path / "warehouse"
    contents_dir = tmp_path / "contents"
    warehouse_dir.mkdir()
    contents_dir.mkdir()

    return Settings(
        movie_warehouse_dir=warehouse_dir,
        warehouse_contents_dir=contents_dir,
        manual_external_ids_file=tmp_path / "manual_external_ids.json",
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        api_cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "test.log",
    )
