"""
Reporter Service

Matches a sample's called diplotypes against dosing guideline annotation groups.
Determines which guidelines are reportable, which annotation groups match and
which genes were not called.
"""

from .models import (
    GeneCall,
    AlternateCall,
    CallSource,
    RelatedGene,
    RelatedChemical,
    AnnotationGroup,
    Guideline,
    GuidelinePackage,
    GeneException,
    MatchDiagnostics,
    ReportSummary,
)
from .config import (
    ReporterConfig,
    CombineStrategy,
    UnknownPhenotypeFallback,
    get_config,
    update_config,
    load_config_from_file,
    save_config_to_file,
)
from .exceptions import (
    ReportContextError,
    DuplicateGeneReportError,
    DuplicateCallDataError,
    MissingGeneReportError,
)
from .phenotype_map import PhenotypeMap, make_lookup_key, normalize_diplotype
from .gene_report import GeneReport
from .guideline_report import GuidelineReport
from .genotype_combiner import combine_genotypes, make_all_called_genotypes
from .match_engine import MatchEngine
from .report_context import ReportContext

__all__ = [
    # Models
    'GeneCall',
    'AlternateCall',
    'CallSource',
    'RelatedGene',
    'RelatedChemical',
    'AnnotationGroup',
    'Guideline',
    'GuidelinePackage',
    'GeneException',
    'MatchDiagnostics',
    'ReportSummary',

    # Config
    'ReporterConfig',
    'CombineStrategy',
    'UnknownPhenotypeFallback',
    'get_config',
    'update_config',
    'load_config_from_file',
    'save_config_to_file',

    # Errors
    'ReportContextError',
    'DuplicateGeneReportError',
    'DuplicateCallDataError',
    'MissingGeneReportError',

    # Matching
    'PhenotypeMap',
    'make_lookup_key',
    'normalize_diplotype',
    'GeneReport',
    'GuidelineReport',
    'combine_genotypes',
    'make_all_called_genotypes',
    'MatchEngine',
    'ReportContext',
]
