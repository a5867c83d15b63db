"""
Errors raised while assembling a report context.
All of them indicate inconsistent input or a construction bug and abort the build.
"""


class ReportContextError(RuntimeError):
    """Base class for fatal report construction errors."""


class DuplicateGeneReportError(ReportContextError):
    """Raised when a second GeneReport is created for a gene symbol."""

    def __init__(self, gene: str):
        self.gene = gene
        super().__init__(f"Gene report for {gene} already exists")


class DuplicateCallDataError(ReportContextError):
    """Raised when call data is applied twice to the same gene and source."""

    def __init__(self, gene: str, source: str):
        self.gene = gene
        self.source = source
        super().__init__(f"{source.capitalize()} call data already applied for {gene}")


class MissingGeneReportError(ReportContextError):
    """Raised when a call or guideline references a gene with no GeneReport."""

    def __init__(self, gene: str):
        self.gene = gene
        super().__init__(f"No gene report for {gene}")
