"""
Genotype Combiner - builds the combined genotype strings for a guideline.

Each related gene contributes the phenotypes of its called diplotypes. The
result is the Cartesian product across genes, each member being the sorted,
deduplicated phenotype tokens joined by a delimiter:

    CYP2C9 -> {"Normal"}, VKORC1 -> {"Poor", "Intermediate"}
    => {"Intermediate;Normal", "Normal;Poor"}

Genes with no called diplotypes are left out of the product.
"""

from typing import Callable, Iterable, List, Mapping, Optional, Set

from .config import CombineStrategy
from .gene_report import GeneReport
from .exceptions import MissingGeneReportError


def gene_phenotypes(
    gene_report: GeneReport,
    translate: Callable[[str], Optional[str]],
) -> Set[str]:
    """Translate every called diplotype of a gene, dropping untranslatable ones."""
    phenotypes = set()
    for key in gene_report.diplotype_lookup_keys():
        phenotype = translate(key)
        if phenotype is not None:
            phenotypes.add(phenotype)
    return phenotypes


def merge_genotype(
    combined: str,
    phenotype: str,
    delimiter: str = ";",
    strategy: CombineStrategy = CombineStrategy.SORTED,
) -> str:
    """Merge one more phenotype into an accumulated combined genotype."""
    if strategy == CombineStrategy.PAIRWISE:
        tokens = {combined, phenotype}
    else:
        tokens = set(combined.split(delimiter))
        tokens.update(phenotype.split(delimiter))
    return delimiter.join(sorted(tokens))


def combine_genotypes(
    phenotype_sets: Iterable[Set[str]],
    delimiter: str = ";",
    strategy: CombineStrategy = CombineStrategy.SORTED,
) -> List[str]:
    """
    Fold per-gene phenotype sets into the set of combined genotypes.
    Empty sets are skipped. Returns the combinations sorted.
    """
    results: Set[str] = set()
    started = False
    for phenotypes in phenotype_sets:
        if not phenotypes:
            continue
        if not started:
            results = set(phenotypes)
            started = True
            continue
        results = {
            merge_genotype(combined, phenotype, delimiter, strategy)
            for combined in results
            for phenotype in phenotypes
        }
    return sorted(results)


def make_all_called_genotypes(
    related_gene_symbols: List[str],
    gene_reports: Mapping[str, GeneReport],
    translate: Callable[[str], Optional[str]],
    delimiter: str = ";",
    strategy: CombineStrategy = CombineStrategy.SORTED,
) -> List[str]:
    """Combined genotypes for a guideline's related genes, in guideline gene order."""
    phenotype_sets = []
    for symbol in related_gene_symbols:
        report = gene_reports.get(symbol)
        if report is None:
            raise MissingGeneReportError(symbol)
        phenotype_sets.append(gene_phenotypes(report, translate))
    return combine_genotypes(phenotype_sets, delimiter, strategy)
