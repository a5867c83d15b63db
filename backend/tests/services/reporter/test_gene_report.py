"""
Unit tests for GeneReport call handling.
Tests primary and alternate call application, lookup keys and exceptions.
"""

import logging

import pytest
from pgx_reporter.services.reporter.exceptions import DuplicateCallDataError
from pgx_reporter.services.reporter.gene_report import GeneReport
from pgx_reporter.services.reporter.models import AlternateCall, GeneCall, GeneException


class TestGeneReport:
    """Test GeneReport state transitions."""

    def test_new_report_is_uncalled(self):
        """Test a fresh report has no diplotypes and is not called"""
        report = GeneReport("CYP2D6")

        assert report.gene == "CYP2D6"
        assert report.diplotypes == []
        assert not report.is_called
        assert not report.is_external_call_source

    def test_set_call_data(self, phenotype_map):
        """Test primary call data populates diplotypes, phenotypes and lookup keys"""
        report = GeneReport("CYP2D6")
        report.set_call_data(GeneCall(gene="CYP2D6", diplotypes=["*1/*4"]), phenotype_map)

        assert report.is_called
        assert report.diplotypes == ["*1/*4"]
        assert report.phenotypes == ["Intermediate Metabolizer"]
        assert report.diplotype_lookup_keys() == ["CYP2D6:*1/*4"]

    def test_empty_call_leaves_gene_uncalled(self, phenotype_map):
        """Test a call with no diplotypes does not mark the gene called"""
        report = GeneReport("CYP2D6")
        report.set_call_data(GeneCall(gene="CYP2D6", diplotypes=[]), phenotype_map)

        assert not report.is_called

    def test_duplicate_primary_call_rejected(self, phenotype_map):
        """Test applying primary call data twice raises"""
        report = GeneReport("CYP2D6")
        report.set_call_data(GeneCall(gene="CYP2D6", diplotypes=["*1/*1"]), phenotype_map)

        with pytest.raises(DuplicateCallDataError):
            report.set_call_data(GeneCall(gene="CYP2D6", diplotypes=["*1/*4"]), phenotype_map)

    def test_call_for_other_gene_rejected(self, phenotype_map):
        """Test a call for a different gene cannot be applied"""
        report = GeneReport("CYP2D6")

        with pytest.raises(ValueError):
            report.set_call_data(GeneCall(gene="CYP2C19", diplotypes=["*1/*1"]), phenotype_map)

    def test_alternate_call_independent_of_primary(self, phenotype_map):
        """Test alternate calls add to primary calls and are tagged"""
        report = GeneReport("CYP2D6")
        report.set_call_data(GeneCall(gene="CYP2D6", diplotypes=["*1/*1"]), phenotype_map)
        report.set_alternate_call_data(AlternateCall(gene="CYP2D6", diplotypes=["*1/*4"]), phenotype_map)

        assert report.is_external_call_source
        assert report.diplotypes == ["*1/*1", "*1/*4"]
        assert report.tagged_diplotypes("Astrolabe") == ["*1/*1", "*1/*4 (Astrolabe)"]

    def test_alternate_call_alone_marks_called(self, phenotype_map):
        """Test an alternate call without a primary call still marks the gene called"""
        report = GeneReport("CYP2D6")
        report.set_alternate_call_data(AlternateCall(gene="CYP2D6", diplotypes=["*4/*4"]), phenotype_map)

        assert report.is_called
        assert report.is_external_call_source

    def test_duplicate_alternate_call_rejected(self, phenotype_map):
        """Test applying alternate call data twice raises"""
        report = GeneReport("CYP2D6")
        report.set_alternate_call_data(AlternateCall(gene="CYP2D6", diplotypes=["*1/*1"]), phenotype_map)

        with pytest.raises(DuplicateCallDataError):
            report.set_alternate_call_data(AlternateCall(gene="CYP2D6", diplotypes=["*1/*1"]), phenotype_map)

    def test_lookup_keys_collapse_equivalent_diplotypes(self, phenotype_map):
        """Test *1/*3 and *3/*1 share a single lookup key"""
        report = GeneReport("B")
        report.set_call_data(GeneCall(gene="B", diplotypes=["*1/*3", "*3/*1"]), phenotype_map)

        assert report.diplotypes == ["*1/*3", "*3/*1"]
        assert report.diplotype_lookup_keys() == ["B:*1/*3"]

    def test_unmapped_diplotype_has_no_display_phenotype(self, phenotype_map, caplog):
        """Test an unmapped diplotype is called but has no phenotype, with one warning"""
        report = GeneReport("B")

        with caplog.at_level(logging.WARNING):
            report.set_call_data(GeneCall(gene="B", diplotypes=["*9/*9"]), phenotype_map)

        assert report.is_called
        assert report.phenotypes == []
        assert caplog.text.count("No phenotype for B *9/*9") == 1

    def test_apply_exceptions_filters_by_gene(self):
        """Test only exceptions for this gene are attached"""
        report = GeneReport("CYP2D6")
        report.apply_exceptions([
            GeneException(gene="CYP2D6", message="Copy number not assessed"),
            GeneException(gene="CYP2C19", message="Not relevant here"),
        ])

        assert [e.message for e in report.exceptions] == ["Copy number not assessed"]
