"""
Data contracts for the reporter matching engine.
These models describe the inputs supplied by collaborators (gene calls,
guideline packages, exception records) and the snapshot handed to rendering.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from enum import Enum


class CallSource(str, Enum):
    """Which calling pipeline produced a diplotype."""
    PRIMARY = "primary"
    ALTERNATE = "alternate"


class GeneCall(BaseModel):
    """Diplotype call for one gene from the primary named-allele matcher."""
    gene: str = Field(..., description="Gene symbol (e.g., CYP2C19)")
    diplotypes: List[str] = Field(default_factory=list, description="Called diplotypes (e.g., *1/*2)")


class AlternateCall(GeneCall):
    """Diplotype call for one gene from the alternate calling pipeline (e.g., Astrolabe)."""
    version: Optional[str] = Field(None, description="Version of the alternate caller")


class RelatedGene(BaseModel):
    """Gene referenced by a guideline."""
    symbol: str = Field(..., description="Gene symbol")


class AnnotationGroup(BaseModel):
    """One dosing recommendation path within a guideline."""
    id: str = Field(..., description="Annotation group identifier")
    name: Optional[str] = Field(None, description="Human readable group name")
    gene_phenotypes: List[str] = Field(
        default_factory=list,
        description="Recognized combined-phenotype strings (e.g., 'Normal;Poor')"
    )
    recommendation: Optional[str] = Field(None, description="Dosing recommendation text")


class RelatedChemical(BaseModel):
    """Drug covered by a guideline."""
    name: str = Field(..., description="Drug name")


class Guideline(BaseModel):
    """Guideline metadata."""
    id: str = Field(..., description="Guideline identifier")
    name: str = Field(..., description="Guideline title")
    related_genes: List[RelatedGene] = Field(default_factory=list, description="Genes this guideline depends on")
    related_chemicals: List[RelatedChemical] = Field(default_factory=list, description="Drugs covered")
    source: Optional[str] = Field(None, description="Publishing body (e.g., CPIC, DPWG)")


class GuidelinePackage(BaseModel):
    """A guideline together with its annotation groups."""
    guideline: Guideline
    groups: List[AnnotationGroup] = Field(default_factory=list, description="Annotation groups in display order")


class GeneException(BaseModel):
    """Display-only warning attached to a gene after matching."""
    gene: str = Field(..., description="Gene symbol the exception applies to")
    rule: Optional[str] = Field(None, description="Condition that triggers the exception")
    message: str = Field(..., description="Message shown with the gene")


class GroupReference(BaseModel):
    """Points at one annotation group within one guideline."""
    guideline_id: str
    group_id: str


class MatchDiagnostics(BaseModel):
    """Counters collected during a match run."""
    guidelines_evaluated: int = 0
    guidelines_reportable: int = 0
    groups_evaluated: int = 0
    groups_matched: int = 0
    zero_match_groups: List[GroupReference] = Field(
        default_factory=list,
        description="Groups in reportable guidelines that matched no called genotype"
    )


class GeneSummary(BaseModel):
    """Rendering view of a GeneReport."""
    gene: str
    called: bool
    diplotypes: List[str] = Field(default_factory=list, description="Diplotypes tagged by call source")
    phenotypes: List[str] = Field(default_factory=list)
    external_call_source: bool = False
    related_guidelines: List[str] = Field(default_factory=list, description="Guideline ids depending on this gene")
    exceptions: List[str] = Field(default_factory=list)


class GuidelineSummary(BaseModel):
    """Rendering view of a GuidelineReport."""
    guideline_id: str
    name: str
    related_genes: List[str] = Field(default_factory=list)
    related_drugs: List[str] = Field(default_factory=list)
    reportable: bool
    uncalled_genes: List[str] = Field(default_factory=list)
    matched_groups: List[str] = Field(default_factory=list)
    matched_diplotypes: Dict[str, List[str]] = Field(default_factory=dict)


class ReportSummary(BaseModel):
    """Snapshot of a ReportContext for rendering collaborators."""
    guidelines: List[GuidelineSummary] = Field(default_factory=list)
    genes: List[GeneSummary] = Field(default_factory=list)
    diagnostics: MatchDiagnostics = Field(default_factory=MatchDiagnostics)
