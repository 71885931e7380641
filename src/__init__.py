"""
ShortCat - Catalogue de courtes vidéos.

Ce package reçoit des soumissions multipart (miniatures + vidéos), stocke
les fichiers sur disque et enregistre les métadonnées de chaque entrée.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (upload, lecture, authentification, orphelins)
- adapters/ : Implémentations concrètes (stockage local, argon2, JWT)
- infrastructure/ : Persistance SQLite (SQLModel)
- web/ : API HTTP (FastAPI)
"""
