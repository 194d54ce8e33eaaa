"""
Services applicatifs de FilmDepot.

Orchestrent le domaine au-dessus des ports : enregistrement des visites,
linking des rips, recuperation des details et requetes de scan.
"""

from .details_fetcher import FetchStats, MovieDetailsFetcher
from .rip_linker import LinkingReport, RipToMovieLinker
from .scan_movies import ScanMoviesManager
from .scan_rips import ScanRipsManager
from .visit_manager import VisitManager

__all__ = [
    "FetchStats",
    "LinkingReport",
    "MovieDetailsFetcher",
    "RipToMovieLinker",
    "ScanMoviesManager",
    "ScanRipsManager",
    "VisitManager",
]
