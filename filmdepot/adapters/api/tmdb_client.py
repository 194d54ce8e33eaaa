"""
Client TMDB pour la recherche de films et la recuperation de leurs details.

Implemente l'interface IMovieAPIClient pour TMDB (The Movie Database).
Utilise le cache persistant et le mecanisme de retry pour gerer
le rate limiting.

Usage:
    cache = APICache()
    client = TMDBClient(api_key="your_key", cache=cache)
    results = await client.search_movie("Sorcerer")
    genres = await client.get_movie_genres(38985)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from filmdepot.adapters.api.cache import APICache
from filmdepot.adapters.api.retry import request_with_retry
from filmdepot.core.entities.media import CastMember, Director, Genre
from filmdepot.core.ports.api_clients import IMovieAPIClient, MovieSearchResult
from filmdepot.utils.helpers import clean_title


def _year_from_date(release_date: Optional[str]) -> Optional[int]:
    """Extrait l'annee d'une date TMDB (format YYYY-MM-DD)."""
    if release_date and len(release_date) >= 4 and release_date[:4].isdigit():
        return int(release_date[:4])
    return None


class TMDBClient(IMovieAPIClient):
    """
    Client API TMDB pour les films.

    Implemente IMovieAPIClient avec:
    - Recherche de films par titre (premiere page de resultats)
    - Resolution d'un ID TMDB en candidat
    - Genres, acteurs, realisateurs, mots-cles et ID IMDb d'un film
    - Cache persistant (24h recherches, 7j details)
    - Retry automatique sur rate limiting (429) et indisponibilite (502-504)

    Les erreurs de transport (httpx.HTTPError) ne sont pas interceptees.
    Seul un 404 est traduit en absence de resultat.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        MAX_CAST_MEMBERS: Nombre d'acteurs retenus par film (ordre du generique)
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    MAX_CAST_MEMBERS = 10

    def __init__(
        self,
        api_key: str,
        cache: APICache,
        language: str = "en-US",
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (API Key v3 ou Read Access Token v4)
            cache: Instance APICache pour le caching des reponses
            language: Langue des titres et genres retournes
            max_attempts: Nombre maximum de tentatives par requete
        """
        self._api_key = api_key
        self._cache = cache
        self._language = language
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=30.0,
            )
        return self._client

    async def _get_json(
        self, path: str, ttl: int, **params: Any
    ) -> Optional[dict[str, Any]]:
        """
        GET sur un endpoint TMDB, avec cache-first.

        Args:
            path: Chemin relatif a TMDB_BASE_URL
            ttl: Duree de vie du payload en cache
            **params: Parametres de requete

        Returns:
            Payload JSON, ou None si la ressource n'existe pas (404)
        """
        cache_key = APICache.make_key("tmdb", path, **params)

        async def fetch() -> Optional[dict[str, Any]]:
            try:
                response = await request_with_retry(
                    self._get_client(),
                    "GET",
                    path,
                    max_attempts=self._max_attempts,
                    params=params,
                )
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 404:
                    logger.debug(f"TMDB 404: {path}")
                    return None
                raise
            return response.json()

        return await self._cache.get_or_fetch(cache_key, fetch, ttl)

    async def _get_movie(self, external_id: int) -> Optional[dict[str, Any]]:
        """Payload /movie/{id}, partage par get_movie_info et get_movie_genres."""
        return await self._get_json(
            f"/movie/{external_id}", APICache.DETAILS_TTL, language=self._language
        )

    async def _get_credits(self, external_id: int) -> dict[str, Any]:
        data = await self._get_json(
            f"/movie/{external_id}/credits", APICache.DETAILS_TTL, language=self._language
        )
        return data or {}

    @staticmethod
    def _to_search_result(item: dict[str, Any]) -> MovieSearchResult:
        """Convertit un film TMDB (recherche ou details) en MovieSearchResult."""
        title = clean_title(item.get("title")) or ""
        original_title = clean_title(item.get("original_title")) or None
        return MovieSearchResult(
            external_id=int(item["id"]),
            title=title or original_title or "",
            original_title=original_title,
            release_date=_year_from_date(item.get("release_date")),
        )

    async def search_movie(self, title: str) -> list[MovieSearchResult]:
        """
        Recherche des films par titre.

        Note: on ne filtre PAS par annee dans la requete : l'annee des noms de
        rips est souvent decalee de +-1 an. Elle sert a la desambiguisation.

        Args:
            title: Titre du film a rechercher

        Returns:
            Liste de MovieSearchResult (vide si aucun resultat)
        """
        data = await self._get_json(
            "/search/movie",
            APICache.SEARCH_TTL,
            query=title.strip(),
            language=self._language,
            include_adult="false",
            page=1,
        )
        if not data:
            return []
        return [self._to_search_result(item) for item in data.get("results", [])]

    async def get_movie_info(self, external_id: int) -> Optional[MovieSearchResult]:
        """
        Resout un ID TMDB en candidat.

        Returns:
            MovieSearchResult, ou None si l'ID est inconnu de TMDB
        """
        data = await self._get_movie(external_id)
        if data is None:
            return None
        return self._to_search_result(data)

    async def get_movie_genres(self, external_id: int) -> list[Genre]:
        """Recupere les genres d'un film (liste vide si le film est inconnu)."""
        data = await self._get_movie(external_id)
        if data is None:
            return []
        return [
            Genre(name=genre["name"], external_id=int(genre["id"]))
            for genre in data.get("genres", [])
            if genre.get("name")
        ]

    async def get_movie_actors(self, external_id: int) -> list[CastMember]:
        """Recupere les acteurs principaux d'un film, dans l'ordre du generique."""
        credits_data = await self._get_credits(external_id)
        cast = sorted(credits_data.get("cast", []), key=lambda c: c.get("order", 0))
        return [
            CastMember(name=actor["name"], external_id=int(actor["id"]))
            for actor in cast[: self.MAX_CAST_MEMBERS]
            if actor.get("name")
        ]

    async def get_movie_directors(self, external_id: int) -> list[Director]:
        """Recupere les realisateurs d'un film (job "Director" dans l'equipe)."""
        credits_data = await self._get_credits(external_id)
        directors: list[Director] = []
        seen: set[int] = set()
        for crew_member in credits_data.get("crew", []):
            if crew_member.get("job") != "Director" or not crew_member.get("name"):
                continue
            person_id = int(crew_member["id"])
            if person_id in seen:
                continue
            seen.add(person_id)
            directors.append(Director(name=crew_member["name"], external_id=person_id))
        return directors

    async def get_movie_keywords(self, external_id: int) -> list[str]:
        """Recupere les mots-cles d'un film."""
        data = await self._get_json(
            f"/movie/{external_id}/keywords", APICache.DETAILS_TTL
        )
        if not data:
            return []
        return [kw["name"] for kw in data.get("keywords", []) if kw.get("name")]

    async def get_movie_imdb_id(self, external_id: int) -> Optional[str]:
        """Recupere l'ID IMDb d'un film via /movie/{id}/external_ids."""
        data = await self._get_json(
            f"/movie/{external_id}/external_ids", APICache.DETAILS_TTL
        )
        if not data:
            return None
        return data.get("imdb_id") or None

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
