"""
Implementation SQLModel du repository MovieRip.

Implemente l'interface IMovieRipRepository. Le nom de fichier est la cle
d'identite d'un rip : une sauvegarde met a jour le rip existant de meme nom.
"""

from typing import Callable, Optional

from sqlmodel import Session, select

from filmdepot.core.entities.rip import MovieRip
from filmdepot.core.ports.repositories import IMovieRipRepository
from filmdepot.infrastructure.persistence.mappers import movie_rip_to_entity
from filmdepot.infrastructure.persistence.models import MovieRipModel
from filmdepot.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)


class SQLModelMovieRipRepository(IMovieRipRepository):
    """
    Repository SQLModel pour les rips.

    Le film associe a un rip est persiste via SQLModelMovieRepository,
    ce qui garantit un seul film par external_id.
    """

    def __init__(self, session: Session) -> None:
        """
        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session
        self._movies = SQLModelMovieRepository(session)

    def get_all(self) -> list[MovieRip]:
        """Liste tous les rips, dans l'ordre d'insertion."""
        models = self._session.exec(select(MovieRipModel).order_by(MovieRipModel.id)).all()
        return [movie_rip_to_entity(model) for model in models]

    def find(self, predicate: Callable[[MovieRip], bool]) -> list[MovieRip]:
        """Liste les rips satisfaisant le predicat."""
        return [rip for rip in self.get_all() if predicate(rip)]

    def _get_model_by_file_name(self, file_name: str) -> Optional[MovieRipModel]:
        statement = select(MovieRipModel).where(MovieRipModel.file_name == file_name)
        return self._session.exec(statement).first()

    def find_by_file_name(self, file_name: str) -> Optional[MovieRip]:
        """Recupere un rip par son nom de fichier."""
        model = self._get_model_by_file_name(file_name)
        if model:
            return movie_rip_to_entity(model)
        return None

    def get_unlinked(self) -> list[MovieRip]:
        """Liste les rips sans film associe."""
        statement = (
            select(MovieRipModel)
            .where(MovieRipModel.movie_id.is_(None))
            .order_by(MovieRipModel.id)
        )
        models = self._session.exec(statement).all()
        return [movie_rip_to_entity(model) for model in models]

    def upsert_model(self, movie_rip: MovieRip) -> MovieRipModel:
        """
        Insere ou met a jour le modele d'un rip.

        Les champs parsed_* d'un rip existant ne sont pas modifies ; seul le
        lien vers le film est mis a jour (jamais retire).

        Retourne :
            Le MovieRipModel persiste (flush effectue, id attribue)
        """
        model = None
        if movie_rip.id:
            model = self._session.get(MovieRipModel, int(movie_rip.id))
        if model is None:
            model = self._get_model_by_file_name(movie_rip.file_name)

        if model is None:
            model = MovieRipModel(
                file_name=movie_rip.file_name,
                parsed_title=movie_rip.parsed_title,
                parsed_release_date=movie_rip.parsed_release_date,
                parsed_rip_quality=movie_rip.parsed_rip_quality,
                parsed_rip_info=movie_rip.parsed_rip_info,
                parsed_rip_group=movie_rip.parsed_rip_group,
            )

        if movie_rip.movie is not None:
            model.movie = self._movies.upsert_model(movie_rip.movie)

        self._session.add(model)
        self._session.flush()
        return model

    def save(self, movie_rip: MovieRip) -> MovieRip:
        """Sauvegarde un rip (insertion ou mise a jour du lien vers le film)."""
        model = self.upsert_model(movie_rip)
        self._session.refresh(model)
        return movie_rip_to_entity(model)
