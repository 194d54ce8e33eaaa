"""
Service de recuperation des details des films canoniques.

Complete les films linkes avec les informations TMDB qui leur manquent :
genres, acteurs, realisateurs, mots-cles et ID IMDb.

Un echec sur un film (identifiant absent, reponse vide) est compte et le
traitement continue. Une erreur de transport interrompt le lot : rien n'est
valide. Sinon tout le lot est valide en un seul commit.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from loguru import logger

from filmdepot.core.entities.media import Movie
from filmdepot.core.ports.api_clients import IMovieAPIClient
from filmdepot.core.ports.repositories import INamedEntityRepository, IUnitOfWork


@dataclass
class FetchStats:
    """Compteurs d'un lot de recuperation."""

    updated: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.updated + self.failed


class MovieDetailsFetcher:
    """
    Remplit les details manquants des films via l'API de films.

    Les genres, acteurs et realisateurs deja connus en base (meme external_id)
    sont reutilises plutot que dupliques.
    """

    def __init__(self, unit_of_work: IUnitOfWork, api_client: IMovieAPIClient) -> None:
        self._uow = unit_of_work
        self._api_client = api_client

    async def _run(
        self,
        movies: list[Movie],
        update: Callable[[Movie], Awaitable[bool]],
        label: str,
    ) -> FetchStats:
        """
        Applique update a chaque film puis valide le lot.

        update retourne False quand le film n'a pas pu etre complete.
        """
        stats = FetchStats()
        try:
            for movie in movies:
                if movie.external_id is None or not await update(movie):
                    logger.warning(f"{label}: aucun resultat pour {movie}")
                    stats.failed += 1
                    continue
                self._uow.movies.save(movie)
                stats.updated += 1
        except Exception:
            self._uow.rollback()
            raise

        self._uow.commit()
        logger.info(f"{label}: {stats.updated} film(s) mis a jour, {stats.failed} echec(s)")
        return stats

    @staticmethod
    def _reuse_existing(repository: INamedEntityRepository, entities: list) -> list:
        """Remplace chaque entite par celle deja connue en base, si elle existe."""
        resolved = []
        for entity in entities:
            existing = None
            if entity.external_id is not None:
                existing = repository.find_by_external_id(entity.external_id)
            resolved.append(existing or entity)
        return resolved

    async def populate_genres(self) -> FetchStats:
        """Recupere les genres des films qui n'en ont pas."""

        async def update(movie: Movie) -> bool:
            genres = await self._api_client.get_movie_genres(movie.external_id)
            movie.genres = self._reuse_existing(self._uow.genres, genres)
            return bool(movie.genres)

        return await self._run(self._uow.movies.get_movies_without_genres(), update, "Genres")

    async def populate_actors(self) -> FetchStats:
        """Recupere les acteurs des films qui n'en ont pas."""

        async def update(movie: Movie) -> bool:
            actors = await self._api_client.get_movie_actors(movie.external_id)
            movie.cast_members = self._reuse_existing(self._uow.cast_members, actors)
            return bool(movie.cast_members)

        return await self._run(self._uow.movies.get_movies_without_actors(), update, "Acteurs")

    async def populate_directors(self) -> FetchStats:
        """Recupere les realisateurs des films qui n'en ont pas."""

        async def update(movie: Movie) -> bool:
            directors = await self._api_client.get_movie_directors(movie.external_id)
            movie.directors = self._reuse_existing(self._uow.directors, directors)
            return bool(movie.directors)

        return await self._run(
            self._uow.movies.get_movies_without_directors(), update, "Realisateurs"
        )

    async def populate_keywords(self) -> FetchStats:
        """Recupere les mots-cles (separes par des virgules) des films qui n'en ont pas."""

        async def update(movie: Movie) -> bool:
            keywords = await self._api_client.get_movie_keywords(movie.external_id)
            movie.keywords = ",".join(keywords) if keywords else None
            return movie.keywords is not None

        return await self._run(
            self._uow.movies.get_movies_without_keywords(), update, "Mots-cles"
        )

    async def populate_imdb_ids(self) -> FetchStats:
        """Recupere l'ID IMDb des films qui n'en ont pas."""

        async def update(movie: Movie) -> bool:
            imdb_id: Optional[str] = await self._api_client.get_movie_imdb_id(
                movie.external_id
            )
            movie.imdb_id = imdb_id
            return imdb_id is not None

        return await self._run(self._uow.movies.get_movies_without_imdb_id(), update, "IMDb")
