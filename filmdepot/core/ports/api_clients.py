"""
Interfaces ports pour le client de l'API films.

Interface abstraite (port) définissant le contrat de la base de films externe.
L'implémentation (adaptateur) fournit le client TMDB concret ; les tests
substituent des mocks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from filmdepot.core.entities.media import CastMember, Director, Genre


@dataclass(frozen=True)
class MovieSearchResult:
    """
    Candidat retourné par une recherche de film.

    Objet éphémère : il n'est jamais persisté et n'est consommé que pendant
    le linking d'un rip.

    Attributs :
        external_id : ID TMDB du film
        title : Titre localisé
        original_title : Titre en langue originale (optionnel)
        release_date : Année de sortie
    """

    external_id: int
    title: str
    original_title: Optional[str] = None
    release_date: Optional[int] = None


class IMovieAPIClient(ABC):
    """
    Interface de la base de films externe.

    Définit la recherche par titre, la résolution d'un ID externe et la
    récupération des détails (genres, acteurs, réalisateurs, mots-clés).
    Les erreurs de transport ne sont pas interceptées : elles remontent à
    l'appelant, qui décide d'interrompre son traitement.
    """

    @abstractmethod
    async def search_movie(self, title: str) -> list[MovieSearchResult]:
        """
        Recherche des films par titre.

        Args :
            title : Titre à rechercher

        Retourne :
            Liste des candidats (éventuellement vide)
        """
        ...

    @abstractmethod
    async def get_movie_info(self, external_id: int) -> Optional[MovieSearchResult]:
        """
        Résout un ID externe en candidat.

        Retourne :
            Le candidat correspondant, ou None si l'ID est inconnu
        """
        ...

    @abstractmethod
    async def get_movie_genres(self, external_id: int) -> list[Genre]:
        """Récupère les genres d'un film."""
        ...

    @abstractmethod
    async def get_movie_actors(self, external_id: int) -> list[CastMember]:
        """Récupère les acteurs principaux d'un film."""
        ...

    @abstractmethod
    async def get_movie_directors(self, external_id: int) -> list[Director]:
        """Récupère les réalisateurs d'un film."""
        ...

    @abstractmethod
    async def get_movie_keywords(self, external_id: int) -> list[str]:
        """Récupère les mots-clés d'un film."""
        ...

    @abstractmethod
    async def get_movie_imdb_id(self, external_id: int) -> Optional[str]:
        """Récupère l'ID IMDb d'un film, ou None s'il n'en a pas."""
        ...
