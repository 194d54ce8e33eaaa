"""
Unite de travail SQLModel.

Regroupe les repositories d'un traitement sur une meme session : les
repositories ne font que des flush, l'unite de travail valide ou annule
l'ensemble des modifications en une fois.
"""

from loguru import logger
from sqlmodel import Session

from filmdepot.core.ports.repositories import IUnitOfWork
from filmdepot.infrastructure.persistence.repositories import (
    SQLModelCastMemberRepository,
    SQLModelDirectorRepository,
    SQLModelGenreRepository,
    SQLModelMovieRepository,
    SQLModelMovieRipRepository,
    SQLModelMovieWarehouseVisitRepository,
)


class SQLModelUnitOfWork(IUnitOfWork):
    """
    Implementation de IUnitOfWork sur une session SQLModel.

    Utilisation :
        with SQLModelUnitOfWork(session) as uow:
            uow.movie_rips.save(rip)
            uow.commit()
    """

    def __init__(self, session: Session) -> None:
        """
        Args :
            session : Session SQLModel partagee par tous les repositories
        """
        self._session = session
        self.movies = SQLModelMovieRepository(session)
        self.movie_rips = SQLModelMovieRipRepository(session)
        self.visits = SQLModelMovieWarehouseVisitRepository(session)
        self.genres = SQLModelGenreRepository(session)
        self.cast_members = SQLModelCastMemberRepository(session)
        self.directors = SQLModelDirectorRepository(session)

    def commit(self) -> None:
        """Valide toutes les modifications en attente."""
        self._session.commit()
        logger.debug("Unite de travail validee")

    def rollback(self) -> None:
        """Annule toutes les modifications en attente."""
        self._session.rollback()
        logger.warning("Unite de travail annulee")

    def close(self) -> None:
        """Ferme la session (la connexion retourne au pool)."""
        self._session.close()
