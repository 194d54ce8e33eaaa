"""
Service d'enregistrement des visites de l'entrepot.

Une visite se fait en deux temps :
1. write_movie_warehouse_contents_to_text_file() liste l'entrepot et ecrit
   le fichier de contenu du jour (movies_YYYYMMDD.txt)
2. read_warehouse_contents_and_register_visit() relit un fichier de contenu
   et enregistre la visite correspondante, rips compris
"""

from pathlib import Path

from loguru import logger

from filmdepot.adapters.file_system import visit_datetime_from_contents_file
from filmdepot.core.entities.rip import MovieRip, MovieWarehouseVisit
from filmdepot.core.exceptions import FileNameParserError, VisitAlreadyRegisteredError
from filmdepot.core.ports.file_system import IDirectoryFileLister
from filmdepot.core.ports.parser import IFilenameParser
from filmdepot.core.ports.repositories import IUnitOfWork


class VisitManager:
    """
    Orchestration des visites de l'entrepot.

    Attributes:
        warehouse_dir: Repertoire de l'entrepot de films
        contents_dir: Repertoire des fichiers de contenu
    """

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        file_lister: IDirectoryFileLister,
        parser: IFilenameParser,
        warehouse_dir: Path,
        contents_dir: Path,
    ) -> None:
        self._uow = unit_of_work
        self._file_lister = file_lister
        self._parser = parser
        self.warehouse_dir = warehouse_dir
        self.contents_dir = contents_dir

    def write_movie_warehouse_contents_to_text_file(self) -> Path:
        """
        Liste l'entrepot dans le fichier de contenu du jour.

        Returns:
            Chemin du fichier ecrit

        Raises:
            FileNotFoundError: Si l'entrepot ou le repertoire de destination n'existe pas
            FileExistsError: Si le fichier du jour a deja ete ecrit
        """
        return self._file_lister.list_movies_and_persist_to_text_file(
            self.warehouse_dir, self.contents_dir
        )

    def _movie_rip_from_file_name(
        self, file_name: str, fail_on_parsing_errors: bool
    ) -> MovieRip:
        """Rip connu (par nom de fichier) ou nouveau rip parse."""
        known = self._uow.movie_rips.find_by_file_name(file_name)
        if known is not None:
            return known
        try:
            return self._parser.parse(file_name)
        except FileNameParserError:
            if fail_on_parsing_errors:
                raise
            logger.warning(f"Nom de fichier non parsable, rip conserve tel quel: {file_name}")
            return MovieRip(file_name=file_name)

    def read_warehouse_contents_and_register_visit(
        self, file_path: Path, fail_on_parsing_errors: bool = False
    ) -> MovieWarehouseVisit:
        """
        Enregistre la visite decrite par un fichier de contenu.

        La date de visite est lue dans le nom du fichier. Les rips deja connus
        sont reutilises tels quels ; les autres sont parses. Tout est valide
        en un seul commit.

        Args:
            file_path: Fichier movies_YYYYMMDD.txt
            fail_on_parsing_errors: Si True, un nom non parsable annule l'enregistrement

        Returns:
            La visite enregistree

        Raises:
            ValueError: Si le nom du fichier ne porte pas de date valide
            VisitAlreadyRegisteredError: Si une visite existe deja a cette date
            FileNameParserError: Si fail_on_parsing_errors et un nom n'est pas parsable
        """
        visit_datetime = visit_datetime_from_contents_file(file_path)
        if self._uow.visits.get_by_datetime(visit_datetime) is not None:
            raise VisitAlreadyRegisteredError(visit_datetime)

        file_names = list(dict.fromkeys(self._file_lister.read_file_names(file_path)))
        try:
            movie_rips = [
                self._movie_rip_from_file_name(name, fail_on_parsing_errors)
                for name in file_names
            ]
            visit = self._uow.visits.add(
                MovieWarehouseVisit(visit_datetime=visit_datetime, movie_rips=movie_rips)
            )
        except Exception:
            self._uow.rollback()
            raise

        self._uow.commit()
        logger.info(f"Visite {visit} enregistree: {len(visit.movie_rips)} rips")
        return visit
