"""
Couche infrastructure de ShortCat.

Ce module contient les implementations concretes des interfaces de
persistance definies dans la couche domaine (ports) :

- persistence/ : Stockage SQLite avec SQLModel (modeles et repositories)
"""
