"""
Adaptateur pour l'enumeration de l'entrepot de films.

Implementation concrete de IDirectoryFileLister : liste les entrees de
l'entrepot et les persiste dans un fichier texte date (movies_YYYYMMDD.txt),
relu ensuite par le service d'enregistrement des visites.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from filmdepot.core.ports.file_system import IDirectoryFileLister
from filmdepot.utils.constants import (
    WAREHOUSE_CONTENTS_DATE_FORMAT,
    WAREHOUSE_CONTENTS_PREFIX,
    WAREHOUSE_CONTENTS_SUFFIX,
)


def contents_file_name(day: date) -> str:
    """Nom du fichier de contenu pour un jour donne (ex: movies_20220321.txt)."""
    return (
        f"{WAREHOUSE_CONTENTS_PREFIX}"
        f"{day.strftime(WAREHOUSE_CONTENTS_DATE_FORMAT)}"
        f"{WAREHOUSE_CONTENTS_SUFFIX}"
    )


def visit_datetime_from_contents_file(contents_file: Path) -> datetime:
    """
    Extrait la date de visite du nom d'un fichier de contenu.

    Raises:
        ValueError: Si le nom ne suit pas le format movies_YYYYMMDD.txt
    """
    name = contents_file.name
    if not (
        name.startswith(WAREHOUSE_CONTENTS_PREFIX)
        and name.endswith(WAREHOUSE_CONTENTS_SUFFIX)
    ):
        raise ValueError(f"Nom de fichier de contenu invalide: {name}")
    date_part = name[len(WAREHOUSE_CONTENTS_PREFIX): -len(WAREHOUSE_CONTENTS_SUFFIX)]
    return datetime.strptime(date_part, WAREHOUSE_CONTENTS_DATE_FORMAT)


class DirectoryFileLister(IDirectoryFileLister):
    """
    Implementation de IDirectoryFileLister pour le systeme de fichiers reel.

    Les entrees cachees (commencant par un point) sont ignorees ; les noms
    retournes sont tries pour un fichier de contenu stable.
    """

    def get_movie_file_names(self, warehouse_dir: Path) -> list[str]:
        """
        Liste les noms des entrees (repertoires et fichiers) de l'entrepot.

        Raises:
            FileNotFoundError: Si le repertoire de l'entrepot n'existe pas
        """
        if not warehouse_dir.is_dir():
            raise FileNotFoundError(str(warehouse_dir))
        return sorted(
            entry.name
            for entry in warehouse_dir.iterdir()
            if not entry.name.startswith(".")
        )

    def list_movies_and_persist_to_text_file(
        self,
        warehouse_dir: Path,
        destination_dir: Path,
        day: Optional[date] = None,
    ) -> Path:
        """
        Liste l'entrepot et ecrit une entree par ligne dans le fichier du jour.

        Args:
            warehouse_dir: Repertoire de l'entrepot
            destination_dir: Repertoire des fichiers de contenu
            day: Jour de la visite (aujourd'hui par defaut)

        Returns:
            Chemin du fichier ecrit

        Raises:
            FileNotFoundError: Si l'un des repertoires n'existe pas
            FileExistsError: Si le fichier du jour existe deja
        """
        if not warehouse_dir.is_dir():
            raise FileNotFoundError(str(warehouse_dir))
        if not destination_dir.is_dir():
            raise FileNotFoundError(str(destination_dir))

        file_path = destination_dir / contents_file_name(day or date.today())
        if file_path.exists():
            raise FileExistsError(str(file_path))

        file_names = self.get_movie_file_names(warehouse_dir)
        file_path.write_text(
            "".join(f"{name}\n" for name in file_names), encoding="utf-8"
        )
        logger.info(f"{len(file_names)} entrees ecrites dans {file_path}")
        return file_path

    def read_file_names(self, contents_file: Path) -> list[str]:
        """Relit un fichier de contenu (une entree non vide par ligne)."""
        lines = contents_file.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip()]
