"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IMovieRepository, IMovieRipRepository, IMovieWarehouseVisitRepository
- IGenreRepository, ICastMemberRepository, IDirectorRepository
- IUnitOfWork : Transaction regroupant les repositories

Ports client API :
- IMovieAPIClient : Base de films externe (TMDB)
- MovieSearchResult : Candidat de recherche

Autres ports :
- IFilenameParser : Parsing des noms de rips
- IDirectoryFileLister : Enumeration de l'entrepôt
"""

from filmdepot.core.ports.api_clients import IMovieAPIClient, MovieSearchResult
from filmdepot.core.ports.file_system import IDirectoryFileLister
from filmdepot.core.ports.parser import IFilenameParser
from filmdepot.core.ports.repositories import (
    ICastMemberRepository,
    IDirectorRepository,
    IGenreRepository,
    IMovieRepository,
    IMovieRipRepository,
    IMovieWarehouseVisitRepository,
    IUnitOfWork,
)

__all__ = [
    # Repositories
    "IMovieRepository",
    "IMovieRipRepository",
    "IMovieWarehouseVisitRepository",
    "IGenreRepository",
    "ICastMemberRepository",
    "IDirectorRepository",
    "IUnitOfWork",
    # Client API
    "IMovieAPIClient",
    "MovieSearchResult",
    # Parsing et fichiers
    "IFilenameParser",
    "IDirectoryFileLister",
]
