"""
Implementation SQLModel du repository des visites de l'entrepot.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from filmdepot.core.entities.rip import MovieWarehouseVisit
from filmdepot.core.ports.repositories import IMovieWarehouseVisitRepository
from filmdepot.infrastructure.persistence.mappers import visit_to_entity
from filmdepot.infrastructure.persistence.models import MovieWarehouseVisitModel
from filmdepot.infrastructure.persistence.repositories.movie_rip_repository import (
    SQLModelMovieRipRepository,
)


class SQLModelMovieWarehouseVisitRepository(IMovieWarehouseVisitRepository):
    """
    Repository SQLModel pour les visites.

    Les visites sont ordonnees par visit_datetime, qui sert aussi de cle.
    """

    def __init__(self, session: Session) -> None:
        """
        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session
        self._movie_rips = SQLModelMovieRipRepository(session)

    def get_all(self) -> list[MovieWarehouseVisit]:
        """Liste toutes les visites, de la plus ancienne a la plus recente."""
        statement = select(MovieWarehouseVisitModel).order_by(
            MovieWarehouseVisitModel.visit_datetime
        )
        return [visit_to_entity(model) for model in self._session.exec(statement).all()]

    def get_visit_dates(self) -> list[datetime]:
        """Liste les dates des visites sans charger leurs rips."""
        statement = select(MovieWarehouseVisitModel.visit_datetime).order_by(
            MovieWarehouseVisitModel.visit_datetime
        )
        return list(self._session.exec(statement).all())

    def _get_model_by_datetime(
        self, visit_datetime: datetime
    ) -> Optional[MovieWarehouseVisitModel]:
        statement = select(MovieWarehouseVisitModel).where(
            MovieWarehouseVisitModel.visit_datetime == visit_datetime
        )
        return self._session.exec(statement).first()

    def get_by_datetime(self, visit_datetime: datetime) -> Optional[MovieWarehouseVisit]:
        """Recupere une visite par son horodatage."""
        model = self._get_model_by_datetime(visit_datetime)
        if model:
            return visit_to_entity(model)
        return None

    def get_closest_movie_warehouse_visit(
        self, visit_datetime: Optional[datetime] = None
    ) -> Optional[MovieWarehouseVisit]:
        """
        Recupere la visite la plus proche d'une date.

        Sans date, retourne la visite la plus recente. En cas d'egalite
        d'ecart, la visite la plus ancienne l'emporte.
        """
        dates = self.get_visit_dates()
        if not dates:
            return None

        if visit_datetime is None:
            closest = dates[-1]
        else:
            closest = min(dates, key=lambda dt: abs(dt - visit_datetime))
        return self.get_by_datetime(closest)

    def add(self, visit: MovieWarehouseVisit) -> MovieWarehouseVisit:
        """
        Enregistre une nouvelle visite avec ses rips.

        Les rips deja connus (par nom de fichier) sont reutilises, les autres
        sont crees.
        """
        model = MovieWarehouseVisitModel(visit_datetime=visit.visit_datetime)
        model.movie_rips = [
            self._movie_rips.upsert_model(movie_rip) for movie_rip in visit.movie_rips
        ]
        self._session.add(model)
        self._session.flush()
        self._session.refresh(model)
        return visit_to_entity(model)
