"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
canoniques et de leurs relations (genres, acteurs, realisateurs).
"""

from typing import Callable, Optional, TypeVar

from sqlmodel import Session, select

from filmdepot.core.entities.media import Movie
from filmdepot.core.entities.rip import MovieWarehouseVisit
from filmdepot.core.ports.repositories import IMovieRepository
from filmdepot.infrastructure.persistence.mappers import movie_to_entity
from filmdepot.infrastructure.persistence.models import (
    CastMemberModel,
    DirectorModel,
    GenreModel,
    MovieModel,
    MovieRipModel,
    MovieWarehouseVisitModel,
    VisitRipLink,
)
from filmdepot.utils.helpers import get_string_tokens_without_punctuation

RelatedModel = TypeVar("RelatedModel", GenreModel, CastMemberModel, DirectorModel)


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Les modifications sont envoyees a la base (flush) mais jamais validees :
    le commit appartient a l'unite de travail.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _list(self, statement) -> list[Movie]:
        models = self._session.exec(statement).all()
        return [movie_to_entity(model) for model in models]

    def get_all(self) -> list[Movie]:
        """Liste tous les films, dans l'ordre d'insertion."""
        return self._list(select(MovieModel).order_by(MovieModel.id))

    def find(self, predicate: Callable[[Movie], bool]) -> list[Movie]:
        """Liste les films satisfaisant le predicat."""
        return [movie for movie in self.get_all() if predicate(movie)]

    def find_by_external_id(self, external_id: int) -> Optional[Movie]:
        """Recupere un film par son ID TMDB."""
        statement = select(MovieModel).where(MovieModel.external_id == external_id)
        model = self._session.exec(statement).first()
        if model:
            return movie_to_entity(model)
        return None

    def search_movies_with_title(self, title: str) -> list[Movie]:
        """
        Recherche les films dont le titre contient tous les mots donnes.

        La comparaison se fait sur les tokens normalises (casse, accents et
        ponctuation ignores).
        """
        query_tokens = set(get_string_tokens_without_punctuation(title))
        if not query_tokens:
            return []
        return self.find(
            lambda movie: query_tokens.issubset(
                get_string_tokens_without_punctuation(movie.title)
            )
        )

    def get_all_movies_in_visit(self, visit: MovieWarehouseVisit) -> list[Movie]:
        """Liste les films distincts des rips linkes presents lors de la visite."""
        statement = (
            select(MovieModel)
            .join(MovieRipModel, MovieRipModel.movie_id == MovieModel.id)
            .join(VisitRipLink, VisitRipLink.movie_rip_id == MovieRipModel.id)
            .join(
                MovieWarehouseVisitModel,
                MovieWarehouseVisitModel.id == VisitRipLink.visit_id,
            )
            .where(MovieWarehouseVisitModel.visit_datetime == visit.visit_datetime)
            .distinct()
            .order_by(MovieModel.id)
        )
        return self._list(statement)

    def get_movies_without_genres(self) -> list[Movie]:
        """Liste les films sans genre."""
        return self._list(select(MovieModel).where(~MovieModel.genres.any()))

    def get_movies_without_actors(self) -> list[Movie]:
        """Liste les films sans acteur."""
        return self._list(select(MovieModel).where(~MovieModel.cast_members.any()))

    def get_movies_without_directors(self) -> list[Movie]:
        """Liste les films sans realisateur."""
        return self._list(select(MovieModel).where(~MovieModel.directors.any()))

    def get_movies_without_keywords(self) -> list[Movie]:
        """Liste les films sans mots-cles."""
        return self._list(select(MovieModel).where(MovieModel.keywords.is_(None)))

    def get_movies_without_imdb_id(self) -> list[Movie]:
        """Liste les films sans ID IMDb."""
        return self._list(select(MovieModel).where(MovieModel.imdb_id.is_(None)))

    def upsert_model(self, movie: Movie) -> MovieModel:
        """
        Insere ou met a jour le modele d'un film, relations comprises.

        Le film existant est recherche par ID interne puis par external_id.

        Retourne :
            Le MovieModel persiste (flush effectue, id attribue)
        """
        existing = None
        if movie.id:
            existing = self._session.get(MovieModel, int(movie.id))
        if existing is None and movie.external_id is not None:
            statement = select(MovieModel).where(
                MovieModel.external_id == movie.external_id
            )
            existing = self._session.exec(statement).first()

        model = existing or MovieModel(title=movie.title)
        model.external_id = movie.external_id
        model.title = movie.title
        model.original_title = movie.original_title
        model.release_date = movie.release_date
        model.imdb_id = movie.imdb_id
        model.keywords = movie.keywords
        model.genres = [self._related_model(GenreModel, g) for g in movie.genres]
        model.cast_members = [
            self._related_model(CastMemberModel, c) for c in movie.cast_members
        ]
        model.directors = [
            self._related_model(DirectorModel, d) for d in movie.directors
        ]

        self._session.add(model)
        self._session.flush()
        return model

    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise a jour), relations comprises."""
        model = self.upsert_model(movie)
        self._session.refresh(model)
        return movie_to_entity(model)

    def _related_model(self, model_class: type[RelatedModel], entity) -> RelatedModel:
        """
        Retrouve (ou cree) le modele d'un genre, acteur ou realisateur.

        Recherche par ID interne, puis par external_id ; une entite sans
        external_id est rapprochee par son nom.
        """
        if entity.id:
            found = self._session.get(model_class, int(entity.id))
            if found is not None:
                return found

        if entity.external_id is not None:
            statement = select(model_class).where(
                model_class.external_id == entity.external_id
            )
        else:
            statement = select(model_class).where(
                model_class.external_id.is_(None), model_class.name == entity.name
            )
        found = self._session.exec(statement).first()
        if found is not None:
            return found

        model = model_class(name=entity.name, external_id=entity.external_id)
        self._session.add(model)
        return model
