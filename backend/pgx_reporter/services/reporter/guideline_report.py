"""
Guideline Report - per-guideline match state.
"""

import logging
from typing import Dict, List, Optional, Set

from .models import GuidelinePackage, AnnotationGroup
from .phenotype_map import PhenotypeMap
from .config import UnknownPhenotypeFallback

logger = logging.getLogger(__name__)


class GuidelineReport:
    """
    Holds one guideline's related genes and annotation groups, and the results
    of matching them against a sample's calls. Only the match engine mutates it.
    """

    def __init__(
        self,
        package: GuidelinePackage,
        phenotype_map: PhenotypeMap,
        unknown_phenotype_fallback: UnknownPhenotypeFallback = UnknownPhenotypeFallback.LOOKUP_KEY,
    ):
        guideline = package.guideline
        self.guideline_id = guideline.id
        self.name = guideline.name
        self.source = guideline.source
        self.related_drugs: List[str] = [c.name for c in guideline.related_chemicals]
        self.groups: List[AnnotationGroup] = list(package.groups)

        # dict.fromkeys keeps first-seen order while dropping duplicates
        self.related_gene_symbols: List[str] = list(
            dict.fromkeys(g.symbol for g in guideline.related_genes)
        )

        self._phenotype_map = phenotype_map
        self._fallback = unknown_phenotype_fallback

        self.reportable = False
        self.uncalled_genes: Set[str] = set()
        self.matched_groups: Set[str] = set()
        self.matched_diplotypes: Dict[str, Set[str]] = {}

    def translate_to_phenotype(self, lookup_key: str) -> Optional[str]:
        """Map a "GENE:diplotype" lookup key to its phenotype string."""
        phenotype = self._phenotype_map.lookup(lookup_key)
        if phenotype is not None:
            return phenotype
        logger.debug("Guideline %s: no phenotype for %s", self.guideline_id, lookup_key)
        if self._fallback == UnknownPhenotypeFallback.SKIP:
            return None
        return lookup_key

    def recognizes(self, group: AnnotationGroup, combined_genotype: str) -> bool:
        return combined_genotype in group.gene_phenotypes

    def add_uncalled_gene(self, gene: str):
        self.uncalled_genes.add(gene)

    def add_matching_group(self, group: AnnotationGroup):
        self.matched_groups.add(group.id)

    def put_matched_diplotype(self, group_id: str, combined_genotype: str):
        self.matched_diplotypes.setdefault(group_id, set()).add(combined_genotype)

    def reset_matches(self):
        """Clear results from a previous evaluation."""
        self.reportable = False
        self.uncalled_genes = set()
        self.matched_groups = set()
        self.matched_diplotypes = {}

    def __repr__(self) -> str:
        return (
            f"GuidelineReport(id={self.guideline_id!r}, genes={self.related_gene_symbols!r}, "
            f"reportable={self.reportable})"
        )
