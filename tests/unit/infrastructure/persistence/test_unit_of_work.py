"""
Tests de SQLModelUnitOfWork : commit et rollback groupes, fermeture de la session.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlmodel import Session

from filmdepot.core.entities.media import Movie
from filmdepot.core.entities.rip import MovieWarehouseVisit
from filmdepot.core.ports.repositories import IUnitOfWork
from filmdepot.infrastructure.persistence.unit_of_work import SQLModelUnitOfWork


def test_implements_interface(uow):
    assert isinstance(uow, IUnitOfWork)


def test_rollback_discards_flushed_changes(uow):
    uow.movies.save(Movie(external_id=9426, title="The Fly"))

    uow.rollback()

    assert uow.movies.get_all() == []


def test_commit_persists_changes(uow):
    uow.movies.save(Movie(external_id=9426, title="The Fly"))
    uow.commit()
    uow.rollback()

    assert [m.title for m in uow.movies.get_all()] == ["The Fly"]


def test_context_manager_rolls_back_on_error(uow):
    with pytest.raises(RuntimeError):
        with uow:
            uow.visits.add(MovieWarehouseVisit(visit_datetime=datetime(2022, 1, 1)))
            raise RuntimeError("boom")

    assert uow.visits.get_all() == []


def test_context_manager_closes_session():
    session = MagicMock(spec=Session)

    with SQLModelUnitOfWork(session) as uow:
        uow.commit()

    session.commit.assert_called_once()
    session.rollback.assert_not_called()
    session.close.assert_called_once()


def test_context_manager_closes_session_after_rollback():
    session = MagicMock(spec=Session)

    with pytest.raises(RuntimeError):
        with SQLModelUnitOfWork(session):
            raise RuntimeError("boom")

    session.rollback.assert_called_once()
    session.close.assert_called_once()
