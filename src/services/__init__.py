"""
Couche services (cas d'utilisation).

Les services orchestrent le domaine pour les cas d'utilisation :
- upload_validator : Politique d'upload (champs, types MIME, nombre de fichiers)
- upload : Création, mise à jour et suppression des entrées
- query : Liste, détail et recherche par titre
- auth : Inscription, connexion et jetons d'accès
- orphans : Détection et suppression des fichiers non référencés

Les services dépendent des ports de core/, jamais des implémentations.
"""
