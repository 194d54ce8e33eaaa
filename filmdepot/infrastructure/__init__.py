"""
Couche infrastructure de FilmDepot.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage SQLite avec SQLModel (modeles, repositories, unite de travail)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation sans modifier la logique metier.
"""
