"""
Adaptateurs de parsing pour FilmDepot.

Ce package contient l'implementation concrete de IFilenameParser:
- RipFilenameParser: Decompose les noms de rips (titre, annee, qualite, infos, groupe)
"""

from filmdepot.adapters.parsing.rip_filename_parser import RipFilenameParser

__all__ = ["RipFilenameParser"]
