"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel) ; les tests utilisent des mocks.

Les repositories n'effectuent jamais de commit : une unité de travail
(IUnitOfWork) regroupe les modifications d'un traitement et les valide
en une seule fois.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Generic, Optional, TypeVar

from filmdepot.core.entities.media import CastMember, Director, Genre, Movie
from filmdepot.core.entities.rip import MovieRip, MovieWarehouseVisit

T = TypeVar("T")


class IMovieRepository(ABC):
    """
    Interface de stockage des films canoniques.

    Un film est unique par external_id : save() met à jour le film existant
    plutôt que d'en créer un second.
    """

    @abstractmethod
    def get_all(self) -> list[Movie]:
        """Liste tous les films."""
        ...

    @abstractmethod
    def find(self, predicate: Callable[[Movie], bool]) -> list[Movie]:
        """Liste les films satisfaisant le prédicat."""
        ...

    @abstractmethod
    def find_by_external_id(self, external_id: int) -> Optional[Movie]:
        """Récupère un film par son ID TMDB."""
        ...

    @abstractmethod
    def search_movies_with_title(self, title: str) -> list[Movie]:
        """Recherche les films dont le titre contient les mots donnés, dans l'ordre."""
        ...

    @abstractmethod
    def get_all_movies_in_visit(self, visit: MovieWarehouseVisit) -> list[Movie]:
        """Liste les films distincts des rips linkés présents lors d'une visite."""
        ...

    @abstractmethod
    def get_movies_without_genres(self) -> list[Movie]:
        """Liste les films sans genre."""
        ...

    @abstractmethod
    def get_movies_without_actors(self) -> list[Movie]:
        """Liste les films sans acteur."""
        ...

    @abstractmethod
    def get_movies_without_directors(self) -> list[Movie]:
        """Liste les films sans réalisateur."""
        ...

    @abstractmethod
    def get_movies_without_keywords(self) -> list[Movie]:
        """Liste les films sans mots-clés."""
        ...

    @abstractmethod
    def get_movies_without_imdb_id(self) -> list[Movie]:
        """Liste les films sans ID IMDb."""
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise à jour), relations comprises."""
        ...


class IMovieRipRepository(ABC):
    """
    Interface de stockage des rips.

    Le nom de fichier est la clé d'identité d'un rip.
    """

    @abstractmethod
    def get_all(self) -> list[MovieRip]:
        """Liste tous les rips."""
        ...

    @abstractmethod
    def find(self, predicate: Callable[[MovieRip], bool]) -> list[MovieRip]:
        """Liste les rips satisfaisant le prédicat."""
        ...

    @abstractmethod
    def find_by_file_name(self, file_name: str) -> Optional[MovieRip]:
        """Récupère un rip par son nom de fichier."""
        ...

    @abstractmethod
    def get_unlinked(self) -> list[MovieRip]:
        """Liste les rips sans film associé."""
        ...

    @abstractmethod
    def save(self, movie_rip: MovieRip) -> MovieRip:
        """Sauvegarde un rip (insertion ou mise à jour du lien vers le film)."""
        ...


class IMovieWarehouseVisitRepository(ABC):
    """Interface de stockage des visites de l'entrepôt."""

    @abstractmethod
    def get_all(self) -> list[MovieWarehouseVisit]:
        """Liste toutes les visites, de la plus ancienne à la plus récente."""
        ...

    @abstractmethod
    def get_visit_dates(self) -> list[datetime]:
        """Liste les dates de toutes les visites, dans l'ordre chronologique."""
        ...

    @abstractmethod
    def get_by_datetime(self, visit_datetime: datetime) -> Optional[MovieWarehouseVisit]:
        """Récupère une visite par son horodatage."""
        ...

    @abstractmethod
    def get_closest_movie_warehouse_visit(
        self, visit_datetime: Optional[datetime] = None
    ) -> Optional[MovieWarehouseVisit]:
        """
        Récupère la visite la plus proche d'une date.

        Args :
            visit_datetime : Date de référence ; sans date, la visite la plus récente

        Retourne :
            La visite la plus proche, ou None s'il n'y a aucune visite
        """
        ...

    @abstractmethod
    def add(self, visit: MovieWarehouseVisit) -> MovieWarehouseVisit:
        """Enregistre une nouvelle visite avec ses rips (nouveaux ou existants)."""
        ...


class INamedEntityRepository(ABC, Generic[T]):
    """
    Interface commune aux entités liées aux films (genres, acteurs, réalisateurs).
    """

    @abstractmethod
    def get_all(self) -> list[T]:
        """Liste toutes les entités."""
        ...

    @abstractmethod
    def find_by_external_id(self, external_id: int) -> Optional[T]:
        """Récupère une entité par son ID TMDB."""
        ...

    @abstractmethod
    def get_by_name(self, name: str) -> list[T]:
        """Recherche les entités dont le nom contient la chaîne (insensible à la casse)."""
        ...


class IGenreRepository(INamedEntityRepository[Genre]):
    """Interface de stockage des genres."""


class ICastMemberRepository(INamedEntityRepository[CastMember]):
    """Interface de stockage des acteurs."""


class IDirectorRepository(INamedEntityRepository[Director]):
    """Interface de stockage des réalisateurs."""


class IUnitOfWork(ABC):
    """
    Unité de travail regroupant les repositories d'une même transaction.

    Utilisation :
        with unit_of_work:
            unit_of_work.movie_rips.save(rip)
            unit_of_work.commit()

    Une exception levée dans le bloc annule les modifications non validées ;
    la sortie du bloc libère la connexion.
    """

    movies: IMovieRepository
    movie_rips: IMovieRipRepository
    visits: IMovieWarehouseVisitRepository
    genres: IGenreRepository
    cast_members: ICastMemberRepository
    directors: IDirectorRepository

    def __enter__(self) -> "IUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
        self.close()

    @abstractmethod
    def commit(self) -> None:
        """Valide toutes les modifications en attente."""
        ...

    @abstractmethod
    def rollback(self) -> None:
        """Annule toutes les modifications en attente."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Libere la connexion ; les modifications non validees sont perdues."""
        ...
