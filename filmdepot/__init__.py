"""
FilmDepot - Catalogue des rips de films d'un entrepot de stockage.

Ce package enregistre les visites successives d'un entrepot ("warehouse"),
extrait les metadonnees des noms de fichiers des rips, relie chaque rip a un
film canonique TMDB et produit les differences et statistiques entre visites.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, exceptions)
- services/ : Couche application (linking, scans, visites, enrichissement)
- adapters/ : Couche infrastructure (CLI, client API, parsing, fichiers)
- infrastructure/ : Persistance SQLite via SQLModel
"""
