"""
Constantes globales pour FilmDepot.

Ce module contient les constantes utilisees dans l'application:
- Vocabulaire de qualite des rips (resolutions et sources)
- Bornes des annees de sortie reconnues dans les noms de rips
- Format des fichiers de contenu de l'entrepot
"""

# Marqueurs de resolution, prioritaires sur les marqueurs de source
# (ex: "WEB-DL.1080p" -> qualite "1080p")
RESOLUTION_MARKERS = frozenset({
    "4320p",
    "2160p",
    "1440p",
    "1080p",
    "1080i",
    "720p",
    "576p",
    "480p",
    "360p",
    "4k",
    "8k",
    "uhd",
})

# Marqueurs de source (support d'origine du rip)
SOURCE_MARKERS = frozenset({
    "bluray",
    "blu-ray",
    "bdrip",
    "brrip",
    "bdremux",
    "remux",
    "web-dl",
    "webdl",
    "webrip",
    "web",
    "hdrip",
    "dvdrip",
    "dvdscr",
    "dvd",
    "dvd5",
    "dvd9",
    "hdtv",
    "pdtv",
    "tvrip",
    "vhsrip",
    "hdcam",
})

# Bornes (incluses) des annees de sortie reconnues
MIN_RELEASE_YEAR = 1900
MAX_RELEASE_YEAR = 2099

# Tolerance (en annees) entre l'annee parsee et l'annee d'un candidat
RELEASE_DATE_TOLERANCE = 1

# Fichiers de contenu de l'entrepot : movies_YYYYMMDD.txt
WAREHOUSE_CONTENTS_PREFIX = "movies_"
WAREHOUSE_CONTENTS_DATE_FORMAT = "%Y%m%d"
WAREHOUSE_CONTENTS_SUFFIX = ".txt"
