"""
Client API externe pour l'enrichissement des films.

Ce module fournit l'adaptateur TMDB (The Movie Database) et son infrastructure:
- APICache: Cache persistant avec TTL differencies (recherche 24h, details 7j)
- RateLimitError / ServiceUnavailableError: Erreurs transitoires (429, 502-504)
- with_retry / request_with_retry: Backoff exponentiel sur erreurs transitoires

Le client implemente IMovieAPIClient defini dans core/ports/api_clients.py.
"""

from filmdepot.adapters.api.cache import APICache
from filmdepot.adapters.api.retry import (
    RateLimitError,
    ServiceUnavailableError,
    TransientAPIError,
    request_with_retry,
    with_retry,
)
from filmdepot.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "APICache",
    "TMDBClient",
    "TransientAPIError",
    "RateLimitError",
    "ServiceUnavailableError",
    "with_retry",
    "request_with_retry",
]
