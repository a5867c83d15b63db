"""
Reporter API - match a sample's calls against dosing guidelines.

Endpoints:
- POST /api/v1/reporter/match - Build a report context and return its summary
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from pgx_reporter.services.reporter.config import CombineStrategy, get_config
from pgx_reporter.services.reporter.exceptions import ReportContextError
from pgx_reporter.services.reporter.models import (
    AlternateCall,
    GeneCall,
    GeneException,
    GuidelinePackage,
    ReportSummary,
)
from pgx_reporter.services.reporter.phenotype_map import PhenotypeMap
from pgx_reporter.services.reporter.report_context import ReportContext

logger = logging.getLogger(__name__)

router = APIRouter()


class MatchRequest(BaseModel):
    """Request for guideline matching."""
    calls: List[GeneCall] = Field(default_factory=list, description="Primary caller output")
    alternate_calls: List[AlternateCall] = Field(default_factory=list, description="Alternate caller output")
    guidelines: List[GuidelinePackage] = Field(..., description="Guideline packages to evaluate")
    phenotype_map: Dict[str, Dict[str, str]] = Field(
        default_factory=dict,
        description="Per-gene diplotype to phenotype tables (gene -> {diplotype: phenotype})"
    )
    exceptions: List[GeneException] = Field(default_factory=list, description="Display-only gene exceptions")
    combine_strategy: Optional[CombineStrategy] = Field(None, description="Override the configured merge strategy")


@router.post("/match", response_model=ReportSummary)
async def match_guidelines(request: MatchRequest):
    """Run matching for one sample and return the report summary."""
    config = get_config()
    if request.combine_strategy is not None:
        config = config.model_copy(update={"combine_strategy": request.combine_strategy})

    try:
        phenotype_map = PhenotypeMap.from_gene_tables(request.phenotype_map)
        context = ReportContext(
            request.calls,
            request.alternate_calls,
            request.guidelines,
            phenotype_map,
            config=config,
        )
    except (ReportContextError, ValueError) as e:
        logger.warning("Report context build failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    context.apply_exceptions(request.exceptions)
    return context.to_summary()
