"""Shared fixtures for reporter tests."""

from typing import Dict, List

import pytest

from pgx_reporter.services.reporter.config import ReporterConfig
from pgx_reporter.services.reporter.models import (
    AnnotationGroup,
    Guideline,
    GuidelinePackage,
    RelatedChemical,
    RelatedGene,
)
from pgx_reporter.services.reporter.phenotype_map import PhenotypeMap


def make_package(
    guideline_id: str,
    genes: List[str],
    groups: Dict[str, List[str]] = None,
    drugs: List[str] = None,
) -> GuidelinePackage:
    """Build a guideline package from plain values."""
    return GuidelinePackage(
        guideline=Guideline(
            id=guideline_id,
            name=f"Guideline {guideline_id}",
            related_genes=[RelatedGene(symbol=g) for g in genes],
            related_chemicals=[RelatedChemical(name=d) for d in (drugs or [])],
        ),
        groups=[
            AnnotationGroup(id=group_id, gene_phenotypes=phenotypes)
            for group_id, phenotypes in (groups or {}).items()
        ],
    )


@pytest.fixture
def phenotype_map():
    """Phenotype table covering the genes used across the tests."""
    return PhenotypeMap.from_gene_tables({
        "A": {"*1/*1": "Normal", "*1/*2": "Normal", "*2/*2": "Intermediate"},
        "B": {"*1/*1": "Normal", "*1/*3": "Intermediate", "*3/*3": "Poor"},
        "C": {"*1/*1": "Rapid", "*1/*17": "Ultrarapid"},
        "CYP2D6": {"*1/*1": "Normal Metabolizer", "*1/*4": "Intermediate Metabolizer",
                   "*4/*4": "Poor Metabolizer"},
    })


@pytest.fixture
def config():
    """Default reporter configuration."""
    return ReporterConfig()


@pytest.fixture
def package_factory():
    """Factory for guideline packages: package_factory(id, genes, groups, drugs)."""
    return make_package
