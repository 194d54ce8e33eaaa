"""
Service de linking des rips vers les films canoniques.

RipToMovieLinker associe chaque rip non linke a un film TMDB :
- recherche par titre parse puis desambiguisation des candidats
- ou lien direct depuis un fichier d'IDs externes saisis manuellement

Regles de desambiguisation (plusieurs candidats) :
    a. annee parsee connue et un seul candidat a +-1 an -> ce candidat
    b. sinon un seul candidat dont le titre (ou titre original) normalise
       est egal au titre parse normalise -> ce candidat
    c. sinon echec "resultats multiples" : jamais de choix au hasard

Un film n'est cree qu'une fois par external_id, meme si plusieurs rips
traites en parallele se resolvent vers lui.
"""

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from filmdepot.core.entities.media import Movie
from filmdepot.core.entities.rip import MovieRip
from filmdepot.core.exceptions import (
    MultipleSearchResultsError,
    NoSearchResultsError,
)
from filmdepot.core.ports.api_clients import IMovieAPIClient, MovieSearchResult
from filmdepot.core.ports.repositories import IUnitOfWork
from filmdepot.utils.constants import RELEASE_DATE_TOLERANCE
from filmdepot.utils.helpers import get_string_tokens_without_punctuation


@dataclass
class LinkingReport:
    """
    Rapport d'un lot de linking.

    Attributes:
        linked: Rips linkes (nom de fichier -> external_id)
        no_results: Rips sans resultat de recherche
        multiple_results: Rips dont les candidats restent ambigus
        skipped: Rips ignores (titre non parse, nom de fichier inconnu)
        invalid_external_ids: IDs manuels inconnus de TMDB (nom de fichier -> id)
    """

    linked: dict[str, int] = field(default_factory=dict)
    no_results: list[str] = field(default_factory=list)
    multiple_results: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    invalid_external_ids: dict[str, int] = field(default_factory=dict)

    @property
    def failed(self) -> int:
        """Nombre de rips restes non linkes suite a un echec."""
        return (
            len(self.no_results)
            + len(self.multiple_results)
            + len(self.invalid_external_ids)
        )

    @property
    def total(self) -> int:
        """Nombre total de rips traites."""
        return len(self.linked) + self.failed + len(self.skipped)


def _parse_year(release_date) -> Optional[int]:
    """Convertit une annee parsee ("1986") en entier, None si absente ou invalide."""
    if release_date is None:
        return None
    text = str(release_date).strip()
    return int(text) if text.isdigit() else None


def _is_within_tolerance(candidate_year: Optional[int], year: int) -> bool:
    return (
        candidate_year is not None
        and abs(candidate_year - year) <= RELEASE_DATE_TOLERANCE
    )


def _title_matches(result: MovieSearchResult, title_tokens: list[str]) -> bool:
    """Egalite des tokens normalises sur le titre ou le titre original."""
    if not title_tokens:
        return False
    if get_string_tokens_without_punctuation(result.title) == title_tokens:
        return True
    return (
        result.original_title is not None
        and get_string_tokens_without_punctuation(result.original_title) == title_tokens
    )


class RipToMovieLinker:
    """
    Service de linking rip -> film canonique.

    Attributes:
        DEFAULT_MAX_CONCURRENCY: Nombre de recherches TMDB simultanees par defaut

    Example:
        linker = RipToMovieLinker(unit_of_work=uow, api_client=tmdb)
        report = await linker.search_and_link()
        print(f"Linkes: {len(report.linked)}, ambigus: {len(report.multiple_results)}")
    """

    DEFAULT_MAX_CONCURRENCY = 5

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        api_client: IMovieAPIClient,
        manual_external_ids_file: Optional[Path] = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        """
        Initialise le service de linking.

        Args:
            unit_of_work: Unite de travail (repositories + transaction)
            api_client: Client de la base de films externe
            manual_external_ids_file: Fichier JSON {nom de fichier: external_id}
            max_concurrency: Nombre maximum de recherches simultanees
        """
        self._uow = unit_of_work
        self._api_client = api_client
        self._manual_external_ids_file = manual_external_ids_file
        self._max_concurrency = max(1, max_concurrency)
        # Cache external_id -> Movie, reinitialise a chaque lot
        self._movies_by_external_id: dict[int, Movie] = {}

    @staticmethod
    def pick_from_search_results(
        results: Iterable[MovieSearchResult],
        title: str,
        release_date: Optional[str] = None,
    ) -> MovieSearchResult:
        """
        Choisit un candidat parmi les resultats d'une recherche.

        Args:
            results: Candidats retournes par la recherche
            title: Titre parse du rip
            release_date: Annee parsee du rip (optionnelle)

        Returns:
            Le candidat retenu

        Raises:
            NoSearchResultsError: Si aucun candidat
            MultipleSearchResultsError: Si les candidats restent ambigus
        """
        candidates = list(results)
        if not candidates:
            raise NoSearchResultsError(title, release_date)
        if len(candidates) == 1:
            return candidates[0]

        year = _parse_year(release_date)
        if year is not None:
            in_tolerance = [
                c for c in candidates if _is_within_tolerance(c.release_date, year)
            ]
            if len(in_tolerance) == 1:
                return in_tolerance[0]
            # Plusieurs candidats dans la tolerance : le titre tranche entre eux
            if in_tolerance:
                candidates = in_tolerance

        title_tokens = get_string_tokens_without_punctuation(title)
        exact_matches = [c for c in candidates if _title_matches(c, title_tokens)]
        if len(exact_matches) == 1:
            return exact_matches[0]

        raise MultipleSearchResultsError(title, release_date, len(candidates))

    async def search_movie_and_pick_from_results(
        self, movie_rip: MovieRip
    ) -> MovieSearchResult:
        """
        Recherche le titre parse d'un rip et choisit le candidat.

        Raises:
            NoSearchResultsError: Si aucun candidat
            MultipleSearchResultsError: Si les candidats restent ambigus
        """
        results = await self._api_client.search_movie(movie_rip.parsed_title)
        return self.pick_from_search_results(
            results, movie_rip.parsed_title, movie_rip.parsed_release_date
        )

    async def _get_or_create_movie(
        self, result: MovieSearchResult, lock: asyncio.Lock
    ) -> Movie:
        """
        Retourne le film canonique d'un candidat, en le creant au besoin.

        Le verrou garantit qu'un external_id resolu par deux rips en parallele
        ne produit qu'un seul film.
        """
        async with lock:
            movie = self._movies_by_external_id.get(result.external_id)
            if movie is None:
                movie = self._uow.movies.find_by_external_id(result.external_id)
                if movie is None:
                    movie = self._uow.movies.save(
                        Movie(
                            external_id=result.external_id,
                            title=result.title,
                            original_title=result.original_title,
                            release_date=result.release_date,
                        )
                    )
                    logger.info(f"Film cree: {movie}")
                self._movies_by_external_id[result.external_id] = movie
            return movie

    async def _link_movie_rip(
        self,
        movie_rip: MovieRip,
        report: LinkingReport,
        semaphore: asyncio.Semaphore,
        lock: asyncio.Lock,
    ) -> None:
        """Resout un rip ; les echecs de desambiguisation vont au rapport."""
        async with semaphore:
            try:
                result = await self.search_movie_and_pick_from_results(movie_rip)
            except NoSearchResultsError as e:
                logger.warning(f"{movie_rip.file_name}: {e}")
                report.no_results.append(movie_rip.file_name)
                return
            except MultipleSearchResultsError as e:
                logger.warning(f"{movie_rip.file_name}: {e}")
                report.multiple_results.append(movie_rip.file_name)
                return

        movie = await self._get_or_create_movie(result, lock)
        movie_rip.movie = movie
        self._uow.movie_rips.save(movie_rip)
        report.linked[movie_rip.file_name] = result.external_id
        logger.debug(f"{movie_rip.file_name} -> {movie}")

    async def search_and_link(self) -> LinkingReport:
        """
        Linke tous les rips non linkes ayant un titre parse.

        Les rips sont resolus en parallele (concurrence bornee). Une erreur
        de transport interrompt le lot : les recherches en cours sont
        annulees, l'unite de travail est annulee et l'erreur remonte.
        Sinon l'ensemble des liens est valide en un seul commit.

        Returns:
            LinkingReport du lot
        """
        report = LinkingReport()
        movie_rips = self._uow.movie_rips.get_unlinked()
        to_link = []
        for movie_rip in movie_rips:
            if movie_rip.parsed_title:
                to_link.append(movie_rip)
            else:
                report.skipped.append(movie_rip.file_name)

        logger.info(f"Linking de {len(to_link)} rips non linkes")
        self._movies_by_external_id = {}
        semaphore = asyncio.Semaphore(self._max_concurrency)
        lock = asyncio.Lock()

        tasks = [
            asyncio.ensure_future(
                self._link_movie_rip(movie_rip, report, semaphore, lock)
            )
            for movie_rip in to_link
        ]
        try:
            await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error("Linking interrompu, modifications annulees")
            self._uow.rollback()
            raise

        self._uow.commit()
        logger.info(
            f"Linking termine: {len(report.linked)} linkes, "
            f"{len(report.no_results)} sans resultat, "
            f"{len(report.multiple_results)} ambigus"
        )
        return report

    def _read_manual_external_ids(self) -> dict[str, int]:
        """
        Lit le fichier JSON des IDs externes manuels.

        Raises:
            FileNotFoundError: Si le fichier n'est pas configure ou n'existe pas
            ValueError: Si le contenu n'est pas un objet {nom de fichier: entier}
        """
        path = self._manual_external_ids_file
        if path is None or not path.is_file():
            raise FileNotFoundError(str(path))

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Objet JSON attendu dans {path}")
        return {str(file_name): int(external_id) for file_name, external_id in data.items()}

    async def link_from_manual_external_ids(self) -> LinkingReport:
        """
        Linke les rips a partir des IDs externes saisis manuellement.

        La recherche est court-circuitee : chaque ID est verifie aupres de
        l'API puis le rip est linke directement. Un nom de fichier inconnu
        ou un ID sans film sont reportes sans interrompre le lot.

        Returns:
            LinkingReport du lot
        """
        report = LinkingReport()
        manual_external_ids = self._read_manual_external_ids()
        self._movies_by_external_id = {}
        lock = asyncio.Lock()

        try:
            for file_name, external_id in manual_external_ids.items():
                movie_rip = self._uow.movie_rips.find_by_file_name(file_name)
                if movie_rip is None:
                    logger.warning(f"Rip inconnu: {file_name}")
                    report.skipped.append(file_name)
                    continue

                result = await self._api_client.get_movie_info(external_id)
                if result is None:
                    logger.warning(f"ID externe inconnu: {external_id} ({file_name})")
                    report.invalid_external_ids[file_name] = external_id
                    continue

                movie_rip.movie = await self._get_or_create_movie(result, lock)
                self._uow.movie_rips.save(movie_rip)
                report.linked[file_name] = external_id
        except Exception:
            self._uow.rollback()
            raise

        self._uow.commit()
        return report

    async def validate_manual_external_ids(self) -> dict[str, dict[str, int]]:
        """
        Verifie les IDs externes manuels sans rien modifier.

        Un ID est valide si le rip existe, si l'ID resout un film dont le titre
        correspond au titre parse et, si le rip a une annee parsee, si l'annee
        du film est a +-1 an.

        Returns:
            {"valid": {nom de fichier: id}, "invalid": {nom de fichier: id}}
        """
        status: dict[str, dict[str, int]] = {"valid": {}, "invalid": {}}
        for file_name, external_id in self._read_manual_external_ids().items():
            movie_rip = self._uow.movie_rips.find_by_file_name(file_name)
            if movie_rip is None:
                status["invalid"][file_name] = external_id
                continue
            result = await self._api_client.get_movie_info(external_id)
            if result is not None and self._result_matches_rip(result, movie_rip):
                status["valid"][file_name] = external_id
            else:
                status["invalid"][file_name] = external_id
        return status

    @staticmethod
    def _result_matches_rip(result: MovieSearchResult, movie_rip: MovieRip) -> bool:
        title_tokens = get_string_tokens_without_punctuation(movie_rip.parsed_title)
        if not _title_matches(result, title_tokens):
            return False
        year = _parse_year(movie_rip.parsed_release_date)
        return year is None or _is_within_tolerance(result.release_date, year)

    def get_all_unlinked_movie_rips(self) -> list[str]:
        """Liste les noms de fichiers des rips non linkes, tries."""
        return sorted(r.file_name for r in self._uow.movie_rips.get_unlinked())
