"""
Implementation du parser de noms de rips.

Ce module fournit RipFilenameParser qui implemente IFilenameParser pour
decomposer un nom de release (ex: "The.Deer.Hunter.1978.REMASTERED.1080p.BluRay.x264.DTS-HD.MA.5.1-FGT")
en titre, annee de sortie, qualite, informations techniques et groupe.

La grammaire est heuristique : un nom ambigu degrade en champs None
plutot que de lever une erreur.
"""

import re
from typing import Optional

from loguru import logger

from filmdepot.core.entities.rip import MovieRip
from filmdepot.core.exceptions import FileNameParserError
from filmdepot.core.ports.parser import IFilenameParser
from filmdepot.utils.constants import (
    MAX_RELEASE_YEAR,
    MIN_RELEASE_YEAR,
    RESOLUTION_MARKERS,
    SOURCE_MARKERS,
)

# Annee sur 4 chiffres, eventuellement entre parentheses ou crochets,
# non collee a une lettre ou un chiffre
_YEAR_PATTERN = re.compile(
    r"(?<![0-9A-Za-z])[\(\[]?(?P<year>[0-9]{4})[\)\]]?(?![0-9A-Za-z])"
)

# Separateurs de segments : point, underscore, espaces
_SEPARATORS = "._ \t"
_SEGMENT_PATTERN = re.compile(r"[^._\s]+")
_SEPARATOR_RUN_PATTERN = re.compile(r"[._\s]+")

_BRACKETS = "[](){}"


class RipFilenameParser(IFilenameParser):
    """
    Parser de noms de rips base sur des regles deterministes.

    Etapes :
        1. Separation titre / annee de sortie
        2. Normalisation du titre (separateurs -> espaces, casse conservee)
        3. Detection de la qualite dans le reste du nom
        4. Separation infos / groupe au DERNIER tiret
    """

    def parse(self, file_name: str) -> MovieRip:
        """
        Parse un nom de rip et extrait les informations structurees.

        Args:
            file_name: Nom brut de l'entree de l'entrepot (sans chemin)

        Returns:
            MovieRip avec file_name et les champs parsed_* renseignes.

        Raises:
            FileNameParserError: Si le nom est vide ou contient un separateur de chemin
        """
        if not file_name or not file_name.strip() or "/" in file_name or "\\" in file_name:
            raise FileNameParserError(file_name)

        title, release_date, remainder = self.split_title_and_release_date(file_name)
        movie_rip = MovieRip(
            file_name=file_name,
            parsed_title=title,
            parsed_release_date=release_date,
        )

        # Sans annee, le reste du nom n'est pas interprete
        if release_date is None or not remainder:
            logger.debug(f"Rip parse sans qualite: {file_name}")
            return movie_rip

        quality, info_and_group = self._extract_quality(remainder)
        info, group = self.split_rip_info_and_group(info_and_group)

        movie_rip.parsed_rip_quality = quality
        movie_rip.parsed_rip_info = info
        movie_rip.parsed_rip_group = group
        return movie_rip

    @staticmethod
    def split_title_and_release_date(text: str) -> tuple[str, Optional[str], str]:
        """
        Separe le titre, l'annee de sortie et le reste du nom.

        L'annee retenue est le premier token d'annee precede d'un titre non vide
        et qui ne suit pas directement un marqueur de qualite. Si elle est
        immediatement suivie d'une autre annee ("Blade.Runner.2049.2017"),
        la seconde est l'annee de sortie et la premiere reste dans le titre.

        Args:
            text: Nom a decomposer

        Returns:
            Tuple (titre, annee ou None, reste). Sans annee, le titre est
            le texte entier normalise et le reste est vide.
        """
        for match in _YEAR_PATTERN.finditer(text):
            if not _is_release_year(match.group("year")):
                continue

            title = _normalize_title(text[: match.start()])
            if not title or _ends_with_quality_marker(text[: match.start()]):
                continue

            year_match = match
            next_match = _YEAR_PATTERN.match(
                text, _skip_separators(text, match.end())
            )
            if next_match is not None and _is_release_year(next_match.group("year")):
                title = _normalize_title(text[: next_match.start()])
                year_match = next_match

            remainder = text[year_match.end():].strip(_SEPARATORS)
            return title, year_match.group("year"), remainder

        return _normalize_title(text), None, ""

    @staticmethod
    def split_rip_info_and_group(text: str) -> tuple[Optional[str], Optional[str]]:
        """
        Separe les informations techniques du groupe de release.

        La coupure se fait au DERNIER tiret : "BluRay.x264.DTS-HD.MA.5.1-FGT"
        donne ("BluRay.x264.DTS-HD.MA.5.1", "FGT"). Sans tiret, tout le texte
        est l'info et le groupe est None.

        Returns:
            Tuple (info, groupe), chaque partie vide etant remplacee par None.
        """
        text = text.strip(_SEPARATORS) if text else ""
        if not text:
            return None, None

        head, sep, tail = text.rpartition("-")
        if not sep:
            return text, None

        info = head.strip(_SEPARATORS) or None
        group = tail.strip(_SEPARATORS) or None
        return info, group

    def _extract_quality(self, remainder: str) -> tuple[Optional[str], str]:
        """
        Cherche le marqueur de qualite dans le reste du nom.

        Les marqueurs de resolution sont prioritaires sur les marqueurs de source.

        Returns:
            Tuple (qualite ou None, texte restant a decouper en info/groupe).
            Sans qualite, le texte restant est le reste complet.
        """
        for markers in (RESOLUTION_MARKERS, SOURCE_MARKERS):
            for segment in _SEGMENT_PATTERN.finditer(remainder):
                found = _match_quality(segment.group(), markers)
                if found is None:
                    continue
                quality, end = found
                return quality, remainder[segment.start() + end:]
        return None, remainder


def _is_release_year(year: str) -> bool:
    """Verifie qu'une annee est dans la plage des annees de sortie reconnues."""
    return MIN_RELEASE_YEAR <= int(year) <= MAX_RELEASE_YEAR


def _skip_separators(text: str, position: int) -> int:
    """Retourne la position du premier caractere non separateur."""
    while position < len(text) and text[position] in _SEPARATORS:
        position += 1
    return position


def _normalize_title(raw_title: str) -> str:
    """
    Normalise un titre brut en conservant sa casse.

    Les points et underscores deviennent des espaces, les espaces multiples
    sont reduits et les parentheses/crochets ouvrants orphelins en fin de
    titre sont retires.
    """
    title = _SEPARATOR_RUN_PATTERN.sub(" ", raw_title).strip()
    return title.rstrip(" -([{").strip()


def _ends_with_quality_marker(text: str) -> bool:
    """Indique si le dernier segment du texte est un marqueur de qualite."""
    segments = _SEGMENT_PATTERN.findall(text)
    if not segments:
        return False
    last = segments[-1].strip(_BRACKETS).lower()
    return last in RESOLUTION_MARKERS or last in SOURCE_MARKERS


def _match_quality(segment: str, markers: frozenset[str]) -> Optional[tuple[str, int]]:
    """
    Teste si un segment correspond a un marqueur de qualite.

    Les crochets entourant le segment sont ignores ("[DvdRip]"), et un
    segment colle au groupe ("1080p-GRP") est teste sur sa partie avant
    le premier tiret.

    Returns:
        Tuple (marqueur tel qu'ecrit dans le nom, position de fin du marqueur
        dans le segment, crochet fermant compris), ou None si le segment
        n'est pas un marqueur.
    """
    core = segment.strip(_BRACKETS)
    if not core:
        return None
    offset = segment.index(core)

    if core.lower() in markers:
        return core, len(segment)

    head = core.split("-", 1)[0]
    if head and head.lower() in markers:
        return head, offset + len(head)
    return None
