"""
Report Context - central assembly of everything needed to render a report.

It gathers
- GeneReports, one per gene referenced by any guideline, populated from the
  primary and alternate caller output
- GuidelineReports, one per guideline package, populated by the match engine
"""

import logging
from typing import Dict, Iterator, List, Optional

from .config import ReporterConfig, get_config
from .exceptions import DuplicateGeneReportError, MissingGeneReportError
from .gene_report import GeneReport
from .guideline_report import GuidelineReport
from .match_engine import MatchEngine
from .models import (
    AlternateCall,
    GeneCall,
    GeneException,
    GeneSummary,
    GuidelinePackage,
    GuidelineSummary,
    MatchDiagnostics,
    ReportSummary,
)
from .phenotype_map import PhenotypeMap

logger = logging.getLogger(__name__)


class ReportContext:
    """
    Builds gene and guideline reports from sample calls and runs matching.
    Any construction error aborts the whole build.
    """

    def __init__(
        self,
        calls: List[GeneCall],
        alternate_calls: List[AlternateCall],
        guideline_packages: List[GuidelinePackage],
        phenotype_map: PhenotypeMap,
        config: Optional[ReporterConfig] = None,
    ):
        self.config = config or get_config()
        self.phenotype_map = phenotype_map
        self._gene_reports: Dict[str, GeneReport] = {}

        self._guideline_reports: List[GuidelineReport] = [
            GuidelineReport(p, phenotype_map, self.config.unknown_phenotype_fallback)
            for p in guideline_packages
        ]

        # make the full set of gene reports based on all the genes used in guidelines
        for symbol in self._related_gene_symbols():
            self.add_gene_report(GeneReport(symbol))

        self._compile_gene_data(calls)
        self._compile_alternate_data(alternate_calls)

        self.diagnostics: MatchDiagnostics = MatchEngine(self._gene_reports, self.config).run(
            self._guideline_reports
        )

        for guideline in self._guideline_reports:
            for gene in guideline.related_gene_symbols:
                self.get_gene_report(gene).add_related_guideline(guideline)

        logger.info(
            "Report context built: %d gene(s), %d guideline(s), %d reportable",
            len(self._gene_reports),
            len(self._guideline_reports),
            self.diagnostics.guidelines_reportable,
        )

    def _related_gene_symbols(self) -> List[str]:
        """Distinct gene symbols across all guidelines, in first-seen order."""
        return list(dict.fromkeys(
            s for r in self._guideline_reports for s in r.related_gene_symbols
        ))

    def add_gene_report(self, report: GeneReport):
        """Register a gene report. Exactly one report per gene symbol."""
        if report.gene in self._gene_reports:
            raise DuplicateGeneReportError(report.gene)
        self._gene_reports[report.gene] = report

    def _compile_gene_data(self, calls: List[GeneCall]):
        for call in calls:
            self.get_gene_report(call.gene).set_call_data(call, self.phenotype_map)

    def _compile_alternate_data(self, calls: List[AlternateCall]):
        for call in calls:
            self.get_gene_report(call.gene).set_alternate_call_data(call, self.phenotype_map)

    def apply_exceptions(self, exceptions: List[GeneException]):
        for report in self._gene_reports.values():
            report.apply_exceptions(exceptions)

    def map_gene_to_diplotypes(self, gene: str) -> Iterator[str]:
        """Lazily yield "GENE:diplotype" for each call of a gene, tagging alternate calls."""
        report = self._gene_reports.get(gene)
        if report is None:
            return
        for diplotype in report.tagged_diplotypes(self.config.alternate_source_label):
            yield f"{gene}:{diplotype}"

    @property
    def guideline_reports(self) -> List[GuidelineReport]:
        return list(self._guideline_reports)

    @property
    def gene_reports(self) -> List[GeneReport]:
        return [self._gene_reports[g] for g in sorted(self._gene_reports)]

    def get_gene_report(self, gene: str) -> GeneReport:
        report = self._gene_reports.get(gene)
        if report is None:
            raise MissingGeneReportError(gene)
        return report

    def to_summary(self) -> ReportSummary:
        label = self.config.alternate_source_label
        return ReportSummary(
            guidelines=[
                GuidelineSummary(
                    guideline_id=r.guideline_id,
                    name=r.name,
                    related_genes=r.related_gene_symbols,
                    related_drugs=r.related_drugs,
                    reportable=r.reportable,
                    uncalled_genes=sorted(r.uncalled_genes),
                    matched_groups=[g.id for g in r.groups if g.id in r.matched_groups],
                    matched_diplotypes={k: sorted(v) for k, v in r.matched_diplotypes.items()},
                )
                for r in self._guideline_reports
            ],
            genes=[
                GeneSummary(
                    gene=g.gene,
                    called=g.is_called,
                    diplotypes=g.tagged_diplotypes(label),
                    phenotypes=g.phenotypes,
                    external_call_source=g.is_external_call_source,
                    related_guidelines=[r.guideline_id for r in g.related_guidelines],
                    exceptions=[e.message for e in g.exceptions],
                )
                for g in self.gene_reports
            ],
            diagnostics=self.diagnostics,
        )
