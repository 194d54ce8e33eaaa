"""
Entités rip et visite d'entrepot.

Un rip est un fichier film encode trouve dans l'entrepot, identifie par son
nom de fichier. Une visite est un instantane horodate du contenu de l'entrepot.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from filmdepot.core.entities.media import Movie


@dataclass
class MovieRip:
    """
    Représente un rip de film present dans l'entrepot.

    Les champs parsed_* sont derives une seule fois du nom de fichier par le
    parser et ne sont plus modifies ensuite. Le film associe est renseigne
    exclusivement par le linker ; son absence signifie "non linke".

    Attributs :
        file_name : Nom de fichier brut (cle unique du rip)
        parsed_title : Titre extrait (None uniquement si le parsing a echoue)
        parsed_release_date : Annee sur 4 chiffres, ou None
        parsed_rip_quality : Marqueur de qualite (ex: "1080p", "DVDRip")
        parsed_rip_info : Informations techniques (ex: "BluRay.x264")
        parsed_rip_group : Groupe de release (ex: "FGT")
        movie : Film canonique associe
        id : Identifiant base de données
    """

    file_name: str = ""
    parsed_title: Optional[str] = None
    parsed_release_date: Optional[str] = None
    parsed_rip_quality: Optional[str] = None
    parsed_rip_info: Optional[str] = None
    parsed_rip_group: Optional[str] = None
    movie: Optional[Movie] = None
    id: Optional[str] = None

    @property
    def is_linked(self) -> bool:
        """Indique si le rip est deja associe a un film canonique."""
        return self.movie is not None


@dataclass
class MovieWarehouseVisit:
    """
    Instantane du contenu de l'entrepot a un moment donne.

    La date de visite sert a la fois d'identite et de cle d'ordre : deux
    visites ne partagent jamais le meme horodatage.

    Attributs :
        visit_datetime : Date et heure de la visite
        movie_rips : Rips presents lors de la visite
        id : Identifiant base de données
    """

    visit_datetime: datetime = field(default_factory=datetime.now)
    movie_rips: list[MovieRip] = field(default_factory=list)
    id: Optional[str] = None

    def __str__(self) -> str:
        return self.visit_datetime.strftime("%Y%m%d")
