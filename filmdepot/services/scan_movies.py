"""
Gestionnaire de scan des films presents dans l'entrepot.

ScanMoviesManager produit, pour une visite, les filtres et comptages sur les
films linkes (genres, acteurs, realisateurs, annee, titre) ainsi que la
difference de films entre deux visites.
"""

from collections import Counter
from datetime import datetime
from typing import Callable, Iterable, Optional, TypeVar

from loguru import logger

from filmdepot.adapters.parsing.rip_filename_parser import RipFilenameParser
from filmdepot.core.entities.media import CastMember, Director, Genre, Movie
from filmdepot.core.entities.rip import MovieWarehouseVisit
from filmdepot.core.ports.repositories import IUnitOfWork
from filmdepot.services.visit_diff import check_visit_order, diff_items
from filmdepot.utils.helpers import get_string_tokens_without_punctuation

T = TypeVar("T")


class ScanMoviesManager:
    """
    Requetes et agregations sur les films d'une visite.

    Les comparaisons de visites operent sur les instantanes deja charges ;
    les autres operations interrogent les repositories de l'unite de travail.
    """

    def __init__(self, unit_of_work: IUnitOfWork) -> None:
        """
        Args:
            unit_of_work: Unite de travail (lecture seule ici)
        """
        self._uow = unit_of_work

    def list_visit_dates(self) -> list[datetime]:
        """Liste les dates de toutes les visites, dans l'ordre chronologique."""
        return self._uow.visits.get_visit_dates()

    def get_closest_visit(
        self, visit_datetime: Optional[datetime] = None
    ) -> Optional[MovieWarehouseVisit]:
        """Visite la plus proche d'une date (la plus recente sans date)."""
        return self._uow.visits.get_closest_movie_warehouse_visit(visit_datetime)

    @staticmethod
    def _distinct_movies(visit: MovieWarehouseVisit) -> list[Movie]:
        """Films distincts des rips linkes d'une visite, dans l'ordre de decouverte."""
        movies = (rip.movie for rip in visit.movie_rips if rip.movie is not None)
        return list(dict.fromkeys(movies))

    def get_visit_diff(
        self,
        visit_left: Optional[MovieWarehouseVisit],
        visit_right: Optional[MovieWarehouseVisit],
    ) -> dict[str, list[str]]:
        """
        Compare les films de deux visites.

        Args:
            visit_left: Visite de reference (None : tout est "added")
            visit_right: Visite comparee, strictement posterieure

        Returns:
            {"added": [...], "removed": [...]} avec les films sous la forme "Titre (annee)"

        Raises:
            ValueError: Si visit_right est None
            VisitOrderError: Si visit_left n'est pas anterieure a visit_right
        """
        check_visit_order(visit_left, visit_right)
        left_movies = self._distinct_movies(visit_left) if visit_left else []
        return diff_items(left_movies, self._distinct_movies(visit_right))

    def get_last_visit_diff(self) -> dict[str, list[str]]:
        """
        Compare les films des deux dernieres visites.

        Avec une seule visite, tous ses films sont "added".

        Raises:
            ValueError: Si aucune visite n'est enregistree
        """
        dates = self.list_visit_dates()
        if not dates:
            raise ValueError("Aucune visite enregistree")
        visit_right = self._uow.visits.get_by_datetime(dates[-1])
        visit_left = self._uow.visits.get_by_datetime(dates[-2]) if len(dates) > 1 else None
        return self.get_visit_diff(visit_left, visit_right)

    def _movies_matching(
        self, visit: MovieWarehouseVisit, predicate: Callable[[Movie], bool]
    ) -> list[Movie]:
        return [m for m in self._uow.movies.get_all_movies_in_visit(visit) if predicate(m)]

    def get_movies_with_genres(self, visit: MovieWarehouseVisit, *genres: Genre) -> list[Movie]:
        """Films de la visite ayant au moins un des genres donnes."""
        wanted = set(genres)
        return self._movies_matching(visit, lambda m: not wanted.isdisjoint(m.genres))

    def get_movies_with_actors(
        self, visit: MovieWarehouseVisit, *actors: CastMember
    ) -> list[Movie]:
        """Films de la visite ayant au moins un des acteurs donnes."""
        wanted = set(actors)
        return self._movies_matching(visit, lambda m: not wanted.isdisjoint(m.cast_members))

    def get_movies_with_directors(
        self, visit: MovieWarehouseVisit, *directors: Director
    ) -> list[Movie]:
        """Films de la visite ayant au moins un des realisateurs donnes."""
        wanted = set(directors)
        return self._movies_matching(visit, lambda m: not wanted.isdisjoint(m.directors))

    def get_movies_with_release_dates(
        self, visit: MovieWarehouseVisit, *release_dates: int
    ) -> list[Movie]:
        """Films de la visite sortis l'une des annees donnees."""
        wanted = {int(date) for date in release_dates}
        return self._movies_matching(visit, lambda m: m.release_date in wanted)

    def _count_by(
        self, visit: MovieWarehouseVisit, related: Callable[[Movie], Iterable[T]]
    ) -> dict[T, int]:
        """Aplatit une relation des films de la visite en comptage (ordre de decouverte)."""
        counter: Counter = Counter()
        for movie in self._uow.movies.get_all_movies_in_visit(visit):
            counter.update(related(movie))
        return dict(counter)

    def get_count_by_genre(self, visit: MovieWarehouseVisit) -> dict[Genre, int]:
        """Nombre de films de la visite par genre."""
        return self._count_by(visit, lambda m: m.genres)

    def get_count_by_actor(self, visit: MovieWarehouseVisit) -> dict[CastMember, int]:
        """Nombre de films de la visite par acteur."""
        return self._count_by(visit, lambda m: m.cast_members)

    def get_count_by_director(self, visit: MovieWarehouseVisit) -> dict[Director, int]:
        """Nombre de films de la visite par realisateur."""
        return self._count_by(visit, lambda m: m.directors)

    def search_movie_entities_by_title(
        self, visit: MovieWarehouseVisit, title: str
    ) -> list[Movie]:
        """
        Recherche les films de la visite par titre.

        Un film correspond si chaque token normalise de la requete figure parmi
        les tokens de son titre (ordre indifferent) : "Blade Runner 2049".
        La requete peut aussi finir par une annee de sortie, decoupee comme dans
        un nom de rip ("Licorice Pizza (2021)") : le film correspond alors si les
        tokens restants figurent dans son titre et si son annee est egale.
        """
        query_tokens = set(get_string_tokens_without_punctuation(title))
        if not query_tokens:
            logger.debug(f"Recherche par titre vide: {title!r}")
            return []

        query_title, release_date, _ = RipFilenameParser.split_title_and_release_date(title)
        year = int(release_date) if release_date else None
        title_tokens = set(get_string_tokens_without_punctuation(query_title))

        def matches(movie: Movie) -> bool:
            movie_tokens = get_string_tokens_without_punctuation(movie.title)
            if query_tokens.issubset(movie_tokens):
                return True
            return (
                year is not None
                and movie.release_date == year
                and title_tokens.issubset(movie_tokens)
            )

        return self._movies_matching(visit, matches)

    def genres_from_name(self, name: str) -> list[Genre]:
        """Genres dont le nom contient la chaine (insensible a la casse)."""
        return self._uow.genres.get_by_name(name)

    def get_actors_from_name(self, name: str) -> list[CastMember]:
        """Acteurs dont le nom contient la chaine (insensible a la casse)."""
        return self._uow.cast_members.get_by_name(name)

    def get_directors_from_name(self, name: str) -> list[Director]:
        """Realisateurs dont le nom contient la chaine (insensible a la casse)."""
        return self._uow.directors.get_by_name(name)
