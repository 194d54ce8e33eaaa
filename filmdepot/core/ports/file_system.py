"""
Interface port pour l'enumeration de l'entrepot.

Le contenu de l'entrepot est liste puis persiste dans un fichier texte date
(une entree par ligne), relu ensuite pour enregistrer la visite.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IDirectoryFileLister(ABC):
    """
    Interface pour lister le contenu de l'entrepot.

    Les noms retournes sont des noms bruts (sans chemin), opaques pour le domaine.
    """

    @abstractmethod
    def get_movie_file_names(self, warehouse_dir: Path) -> list[str]:
        """
        Liste les noms des entrees de l'entrepot.

        Raises:
            FileNotFoundError: Si le repertoire de l'entrepot n'existe pas
        """
        ...

    @abstractmethod
    def list_movies_and_persist_to_text_file(
        self, warehouse_dir: Path, destination_dir: Path
    ) -> Path:
        """
        Liste l'entrepot et ecrit le resultat dans destination_dir/movies_YYYYMMDD.txt.

        Retourne:
            Chemin du fichier ecrit

        Raises:
            FileNotFoundError: Si l'un des repertoires n'existe pas
            FileExistsError: Si le fichier du jour existe deja
        """
        ...

    @abstractmethod
    def read_file_names(self, contents_file: Path) -> list[str]:
        """Relit un fichier de contenu (une entree non vide par ligne)."""
        ...
