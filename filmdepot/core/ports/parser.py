"""
Interface port pour le parsing des noms de fichiers de rips.
"""

from abc import ABC, abstractmethod

from filmdepot.core.entities.rip import MovieRip


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de rips.

    Definit le contrat pour decomposer un nom de release
    (titre, annee, qualite, infos, groupe) en MovieRip.
    """

    @abstractmethod
    def parse(self, file_name: str) -> MovieRip:
        """
        Parse un nom de rip et extrait les informations structurees.

        Args:
            file_name: Nom brut de l'entree de l'entrepot (sans chemin)

        Retourne:
            MovieRip avec file_name et les champs parsed_* renseignes.
            Les champs non identifies restent a None.

        Raises:
            FileNameParserError: Si le nom est vide ou contient un separateur de chemin
        """
        ...
