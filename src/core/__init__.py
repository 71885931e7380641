"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et la taxonomie d'erreurs. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (CatalogEntry, Principal)
- ports/ : Interfaces abstraites (repositories, stockage de fichiers, sécurité)
- value_objects/ : Objets valeur immutables (FilePart, identifiants)
"""
