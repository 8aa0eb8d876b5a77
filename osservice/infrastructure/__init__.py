"""
Couche infrastructure d'OsService.

Ce module contient les implementations concretes des interfaces de persistance
definies dans la couche domaine (ports) :

- persistence/ : Stockage SQL avec SQLModel (modeles et repositories)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: PostgreSQL au lieu de SQLite)
sans modifier la logique metier.
"""
