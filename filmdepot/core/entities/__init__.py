"""
Business entities representing core domain concepts.

Exports:
- MovieRip: A movie file found in the warehouse
- MovieWarehouseVisit: A timestamped snapshot of the warehouse contents
- Movie: Canonical movie from TMDB
- Genre, CastMember, Director: Entities related to a movie
"""

from filmdepot.core.entities.media import CastMember, Director, Genre, Movie
from filmdepot.core.entities.rip import MovieRip, MovieWarehouseVisit

__all__ = [
    "MovieRip",
    "MovieWarehouseVisit",
    "Movie",
    "Genre",
    "CastMember",
    "Director",
]
