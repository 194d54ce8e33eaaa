"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions
du domaine. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (MovieRip, Movie, MovieWarehouseVisit, Genre...)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- exceptions : Erreurs métier (parsing, linking, visites)
"""
