"""
Container d'injection de dependances via dependency-injector.

Assemble les adaptateurs (parser, lister, client TMDB, persistance) et les
services applicatifs pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.tmdb_client import TMDBClient
from .adapters.file_system import DirectoryFileLister
from .adapters.parsing.rip_filename_parser import RipFilenameParser
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db, open_session
from .infrastructure.persistence.unit_of_work import SQLModelUnitOfWork
from .services.details_fetcher import MovieDetailsFetcher
from .services.rip_linker import RipToMovieLinker
from .services.scan_movies import ScanMoviesManager
from .services.scan_rips import ScanRipsManager
from .services.visit_manager import VisitManager


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        linker = container.rip_linker()
        container.shutdown_resources()  # Ferme la session
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine unique, schema cree une fois au demarrage
    engine = providers.Singleton(create_db_engine, database_url=config.provided.database_url)
    database = providers.Resource(init_db, engine=engine)

    # Une session par container, fermee par shutdown_resources()
    session = providers.Resource(open_session, engine=engine)

    # Unites de travail - partagent la session du container
    unit_of_work = providers.Factory(SQLModelUnitOfWork, session=session)

    # Adapters - implementations concretes des ports
    filename_parser = providers.Singleton(RipFilenameParser)
    file_lister = providers.Singleton(DirectoryFileLister)

    api_cache = providers.Singleton(
        APICache,
        cache_dir=providers.Callable(str, config.provided.api_cache_dir),
    )

    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        cache=api_cache,
    )

    # Services - Factory car ils dependent d'une unite de travail fraiche
    visit_manager = providers.Factory(
        VisitManager,
        unit_of_work=unit_of_work,
        file_lister=file_lister,
        parser=filename_parser,
        warehouse_dir=config.provided.movie_warehouse_dir,
        contents_dir=config.provided.warehouse_contents_dir,
    )

    rip_linker = providers.Factory(
        RipToMovieLinker,
        unit_of_work=unit_of_work,
        api_client=tmdb_client,
        manual_external_ids_file=config.provided.manual_external_ids_file,
        max_concurrency=config.provided.linker_max_concurrency,
    )

    details_fetcher = providers.Factory(
        MovieDetailsFetcher,
        unit_of_work=unit_of_work,
        api_client=tmdb_client,
    )

    scan_movies_manager = providers.Factory(ScanMoviesManager, unit_of_work=unit_of_work)
    scan_rips_manager = providers.Factory(ScanRipsManager, unit_of_work=unit_of_work)
