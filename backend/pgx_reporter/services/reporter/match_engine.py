"""
Match Engine - evaluates guidelines against populated gene reports.

For every guideline, in the order supplied:
1. Record whether any related gene is called (reportable)
2. Record every related gene that is not called
3. For reportable guidelines, build the combined genotypes and bind each
   annotation group to the combined genotypes it recognizes

Guidelines are independent of each other; gene reports are only read.
"""

import logging
from typing import List, Mapping, Optional

from .config import ReporterConfig, get_config
from .gene_report import GeneReport
from .guideline_report import GuidelineReport
from .genotype_combiner import make_all_called_genotypes
from .models import MatchDiagnostics, GroupReference
from .exceptions import MissingGeneReportError

logger = logging.getLogger(__name__)


class MatchEngine:
    """Runs the matching step over a set of guideline reports."""

    def __init__(
        self,
        gene_reports: Mapping[str, GeneReport],
        config: Optional[ReporterConfig] = None,
    ):
        self.gene_reports = gene_reports
        self.config = config or get_config()

    def is_called(self, gene: str) -> bool:
        report = self.gene_reports.get(gene)
        if report is None:
            raise MissingGeneReportError(gene)
        return report.is_called

    def evaluate(self, guideline: GuidelineReport, diagnostics: Optional[MatchDiagnostics] = None):
        """Evaluate one guideline, replacing any earlier results it holds."""
        diagnostics = diagnostics if diagnostics is not None else MatchDiagnostics()
        guideline.reset_matches()
        diagnostics.guidelines_evaluated += 1

        called = {g: self.is_called(g) for g in guideline.related_gene_symbols}
        guideline.reportable = any(called.values())
        for gene, is_called in called.items():
            if not is_called:
                guideline.add_uncalled_gene(gene)

        if not guideline.reportable:
            logger.debug("Guideline %s not reportable, uncalled: %s",
                         guideline.guideline_id, sorted(guideline.uncalled_genes))
            return diagnostics

        diagnostics.guidelines_reportable += 1
        called_genotypes = make_all_called_genotypes(
            guideline.related_gene_symbols,
            self.gene_reports,
            guideline.translate_to_phenotype,
            delimiter=self.config.genotype_delimiter,
            strategy=self.config.combine_strategy,
        )

        for group in guideline.groups:
            diagnostics.groups_evaluated += 1
            matched = False
            for genotype in called_genotypes:
                if guideline.recognizes(group, genotype):
                    matched = True
                    guideline.add_matching_group(group)
                    guideline.put_matched_diplotype(group.id, genotype)

            if matched:
                diagnostics.groups_matched += 1
            else:
                diagnostics.zero_match_groups.append(
                    GroupReference(guideline_id=guideline.guideline_id, group_id=group.id)
                )

        log = logger.info if self.config.verbose_logging else logger.debug
        log("Guideline %s: genotypes=%s matched=%s",
            guideline.guideline_id, called_genotypes, sorted(guideline.matched_groups))
        return diagnostics

    def run(self, guidelines: List[GuidelineReport]) -> MatchDiagnostics:
        """Evaluate every guideline and return the collected diagnostics."""
        diagnostics = MatchDiagnostics()
        for guideline in guidelines:
            self.evaluate(guideline, diagnostics)

        if self.config.log_zero_match_groups and diagnostics.zero_match_groups:
            logger.warning(
                "%d annotation group(s) in reportable guidelines matched no called genotype",
                len(diagnostics.zero_match_groups),
            )
        return diagnostics
