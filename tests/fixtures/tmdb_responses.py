"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the search, details,
credits, keywords and external ids endpoints of "The Fly" (1986).
These fixtures are used with respx to mock httpx calls in tests.
"""

# GET /search/movie?query=The Fly
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "genre_ids": [27, 878],
            "id": 9426,
            "original_language": "en",
            "original_title": "The Fly",
            "overview": "When a scientist's teleportation experiment goes awry...",
            "popularity": 31.2,
            "release_date": "1986-08-15",
            "title": "The Fly",
            "video": False,
            "vote_average": 7.3,
            "vote_count": 3900,
        },
        {
            "adult": False,
            "genre_ids": [27, 878],
            "id": 11815,
            "original_language": "en",
            "original_title": "The Fly",
            "overview": "A scientist invents a matter transporter...",
            "popularity": 12.4,
            "release_date": "1958-07-16",
            "title": "The Fly",
            "video": False,
            "vote_average": 6.8,
            "vote_count": 640,
        },
        {
            "adult": False,
            "genre_ids": [27],
            "id": 33351,
            "original_language": "en",
            "original_title": "Curse of the Fly",
            "overview": "",
            "popularity": 3.1,
            "release_date": "",
            "title": "Curse of the Fly",
            "video": False,
            "vote_average": 5.2,
            "vote_count": 60,
        },
    ],
    "total_pages": 1,
    "total_results": 3,
}

TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /movie/9426
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "genres": [
        {"id": 27, "name": "Horror"},
        {"id": 878, "name": "Science Fiction"},
    ],
    "id": 9426,
    "imdb_id": "tt0091064",
    "original_language": "en",
    "original_title": "The Fly",
    "overview": "When a scientist's teleportation experiment goes awry...",
    "release_date": "1986-08-15",
    "runtime": 96,
    "title": "The Fly\u200e ",
}

# GET /movie/9426/credits
TMDB_MOVIE_CREDITS_RESPONSE = {
    "id": 9426,
    "cast": [
        {"id": 4785, "name": "Geena Davis", "character": "Veronica Quaife", "order": 1},
        {"id": 4784, "name": "Jeff Goldblum", "character": "Seth Brundle", "order": 0},
        {"id": 4786, "name": "John Getz", "character": "Stathis Borans", "order": 2},
    ],
    "crew": [
        {"id": 224, "name": "David Cronenberg", "job": "Director", "department": "Directing"},
        {"id": 224, "name": "David Cronenberg", "job": "Director", "department": "Directing"},
        {"id": 224, "name": "David Cronenberg", "job": "Screenplay", "department": "Writing"},
        {"id": 2952, "name": "Howard Shore", "job": "Original Music Composer", "department": "Sound"},
    ],
}

# GET /movie/9426/keywords
TMDB_MOVIE_KEYWORDS_RESPONSE = {
    "id": 9426,
    "keywords": [
        {"id": 1454, "name": "transformation"},
        {"id": 2030, "name": "teleportation"},
    ],
}

# GET /movie/9426/external_ids
TMDB_MOVIE_EXTERNAL_IDS_RESPONSE = {
    "id": 9426,
    "imdb_id": "tt0091064",
    "wikidata_id": "Q733917",
    "facebook_id": None,
}
