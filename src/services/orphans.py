"""
Detection et suppression des fichiers orphelins.

Un fichier est orphelin quand aucune entree du catalogue ne le reference :
entree supprimee sans eviction, upload interrompu (PartialUploadFailure),
client deconnecte en cours d'envoi, ou remplacement lors d'une mise a jour.
"""

from dataclasses import dataclass, field

from loguru import logger

from src.core.ports.asset_store import IAssetStore
from src.core.ports.repositories import ICatalogRepository


@dataclass
class OrphanReport:
    """
    Resultat d'un balayage.

    Attributs:
        orphans: References non referencees par le catalogue
        deleted: References effectivement supprimees
        failed: References dont la suppression a echoue
    """

    orphans: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class OrphanSweeper:
    """
    Compare le contenu du stockage aux references du catalogue.

    Note: un upload en cours peut avoir stocke ses fichiers sans avoir encore
    ecrit son entree ; ne pas lancer de suppression pendant que le service
    recoit des uploads.
    """

    def __init__(self, asset_store: IAssetStore, catalog_repository: ICatalogRepository) -> None:
        self._store = asset_store
        self._repo = catalog_repository

    def find_orphans(self) -> list[str]:
        """Liste les references stockees sans entree correspondante."""
        referenced: set[str] = set()
        for entry in self._repo.list_all():
            referenced.update(entry.asset_refs)
        return [ref for ref in self._store.list_references() if ref not in referenced]

    def sweep(self, dry_run: bool = True) -> OrphanReport:
        """
        Detecte les orphelins et les supprime si dry_run est False.

        Args:
            dry_run: Si True, ne supprime rien

        Returns:
            OrphanReport detaillant les orphelins et les suppressions
        """
        report = OrphanReport(orphans=self.find_orphans())
        if dry_run:
            logger.info(f"{len(report.orphans)} fichier(s) orphelin(s) detecte(s)")
            return report

        for ref in report.orphans:
            if self._store.delete(ref):
                report.deleted.append(ref)
            else:
                report.failed.append(ref)
                logger.warning(f"Suppression impossible : {ref}")
        logger.info(
            f"Orphelins supprimes : {len(report.deleted)}/{len(report.orphans)}"
        )
        return report
