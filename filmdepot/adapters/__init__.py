"""
Adaptateurs de FilmDepot : implementations concretes des ports.

- api/ : client TMDB (httpx), cache disque et retry
- parsing/ : parser des noms de fichiers de rips
- file_system : enumeration de l'entrepot et fichiers de contenu
- cli/ : commandes typer
"""
