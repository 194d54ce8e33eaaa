"""
Cache persistant des reponses de l'API TMDB.

Le cache utilise diskcache pour la persistence sur disque : une relance de
linking ou de recuperation de details ne refait pas les appels deja servis.
Les valeurs stockees sont les payloads JSON bruts (dictionnaires).

TTL par defaut:
- Recherches (SEARCH_TTL): 24 heures
- Details, credits, mots-cles (DETAILS_TTL): 7 jours
"""

import asyncio
from functools import partial
from typing import Any, Awaitable, Callable, Optional

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les appels API.

    Les operations diskcache sont bloquantes ; elles sont executees via
    run_in_executor pour ne pas bloquer la boucle asyncio.

    Example:
        cache = APICache(cache_dir=".cache/api")
        key = APICache.make_key("tmdb", "/search/movie", query="sorcerer")
        data = await cache.get_or_fetch(key, fetch, APICache.SEARCH_TTL)
    """

    SEARCH_TTL = 24 * 60 * 60  # 24 heures
    DETAILS_TTL = 7 * 24 * 60 * 60  # 7 jours

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        """
        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(cache_dir)

    @staticmethod
    def make_key(source: str, path: str, **params: Any) -> str:
        """
        Construit une cle stable a partir d'un endpoint et de ses parametres.

        Les parametres sont tries pour que l'ordre d'appel n'influe pas.
        Ex: make_key("tmdb", "/movie/42", language="en-US") -> "tmdb:/movie/42?language=en-US"
        """
        if not params:
            return f"{source}:{path}"
        query = "&".join(f"{name}={params[name]}" for name in sorted(params))
        return f"{source}:{path}?{query}"

    async def get(self, key: str) -> Optional[Any]:
        """Recupere une valeur du cache, ou None si absente ou expiree."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Stocke une valeur dans le cache avec un TTL en secondes."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def get_or_fetch(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Optional[Any]]],
        ttl: int,
    ) -> Optional[Any]:
        """
        Pattern cache-first : retourne la valeur en cache ou l'obtient via fetch.

        Un resultat None (ressource absente) n'est pas mis en cache.

        Args:
            key: Cle du cache
            fetch: Coroutine sans argument produisant la valeur
            ttl: Duree de vie en secondes

        Returns:
            La valeur en cache ou fraichement obtenue
        """
        cached = await self.get(key)
        if cached is not None:
            return cached

        value = await fetch()
        if value is not None:
            await self.set(key, value, ttl)
        return value

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
