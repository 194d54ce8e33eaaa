"""
Mecanisme de retry avec backoff exponentiel pour l'API TMDB.

Les reponses transitoires sont converties en exceptions puis relancees
avec un delai croissant et du jitter aleatoire :
- 429 Too Many Requests : RateLimitError (respecte le header Retry-After)
- 502, 503, 504 : ServiceUnavailableError

Les autres erreurs HTTP (404 compris) remontent immediatement ; c'est
a l'appelant de decider si une ressource absente est une erreur.

Usage:
    response = await request_with_retry(client, "GET", "/search/movie", params=params)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

# Codes HTTP signalant une indisponibilite temporaire du serveur
TRANSIENT_STATUS_CODES = frozenset({502, 503, 504})


class TransientAPIError(Exception):
    """
    Erreur temporaire de l'API, relancee automatiquement.

    Attributes:
        status_code: Code HTTP recu
        retry_after: Secondes a attendre indiquees par le serveur, ou None
    """

    def __init__(self, status_code: int, retry_after: Optional[int] = None) -> None:
        self.status_code = status_code
        self.retry_after = retry_after
        super().__init__(f"HTTP {status_code}. Retry after: {retry_after}s")


class RateLimitError(TransientAPIError):
    """Exception levee quand l'API retourne 429 Too Many Requests."""

    def __init__(self, retry_after: Optional[int] = None) -> None:
        super().__init__(429, retry_after)


class ServiceUnavailableError(TransientAPIError):
    """Exception levee sur 502/503/504 (passerelle ou service indisponible)."""


def _parse_retry_after(response: httpx.Response) -> Optional[int]:
    """Lit le header Retry-After exprime en secondes (ignore le format date)."""
    header = response.headers.get("Retry-After")
    if header and header.strip().isdigit():
        return int(header.strip())
    return None


def _wait_retry_after_or_backoff(max_wait: int):
    """
    Strategie d'attente tenacity.

    Utilise le Retry-After du serveur s'il est connu (plafonne a max_wait),
    sinon un backoff exponentiel avec jitter.
    """
    backoff = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def _wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        retry_after = getattr(error, "retry_after", None)
        if retry_after is not None:
            return float(min(retry_after, max_wait))
        return backoff(retry_state)

    return _wait


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"Erreur API transitoire ({error}), tentative {retry_state.attempt_number}"
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur TransientAPIError.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(TransientAPIError),
        wait=_wait_retry_after_or_backoff(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur les erreurs transitoires.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler (relative a la base_url du client)
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre deux tentatives en secondes
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        ServiceUnavailableError: Si 502/503/504 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
        httpx.TransportError: Pour les erreurs reseau (timeout, connexion)
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response))
        if response.status_code in TRANSIENT_STATUS_CODES:
            raise ServiceUnavailableError(
                response.status_code, _parse_retry_after(response)
            )
        response.raise_for_status()
        return response

    return await _do_request()
