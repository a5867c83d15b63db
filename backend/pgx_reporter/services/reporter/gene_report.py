"""
Gene Report - per-gene call state used by matching and rendering.
"""

import logging
from typing import Dict, List, Optional, TYPE_CHECKING

from .models import GeneCall, AlternateCall, CallSource, GeneException
from .phenotype_map import PhenotypeMap, make_lookup_key
from .exceptions import DuplicateCallDataError

if TYPE_CHECKING:
    from .guideline_report import GuidelineReport

logger = logging.getLogger(__name__)


class GeneReport:
    """
    Called diplotypes for one gene.

    Diplotypes keep insertion order and remember which caller produced them.
    Primary and alternate call data may each be applied once.
    """

    def __init__(self, gene: str):
        self._gene = gene
        self._diplotypes: Dict[str, CallSource] = {}
        self._phenotypes: Dict[str, Optional[str]] = {}
        self._has_primary_call = False
        self._has_alternate_call = False
        self._related_guidelines: List["GuidelineReport"] = []
        self._exceptions: List[GeneException] = []

    @property
    def gene(self) -> str:
        return self._gene

    @property
    def diplotypes(self) -> List[str]:
        return list(self._diplotypes)

    @property
    def phenotypes(self) -> List[str]:
        """Display phenotypes for called diplotypes that have a map entry."""
        return [p for p in self._phenotypes.values() if p is not None]

    @property
    def is_called(self) -> bool:
        return bool(self._diplotypes)

    @property
    def is_external_call_source(self) -> bool:
        return self._has_alternate_call

    @property
    def related_guidelines(self) -> List["GuidelineReport"]:
        return list(self._related_guidelines)

    @property
    def exceptions(self) -> List[GeneException]:
        return list(self._exceptions)

    def set_call_data(self, call: GeneCall, phenotype_map: PhenotypeMap):
        """Apply the primary caller's diplotypes for this gene."""
        if self._has_primary_call:
            raise DuplicateCallDataError(self._gene, CallSource.PRIMARY.value)
        self._check_gene(call)
        self._has_primary_call = True
        self._add_diplotypes(call.diplotypes, CallSource.PRIMARY, phenotype_map)

    def set_alternate_call_data(self, call: AlternateCall, phenotype_map: PhenotypeMap):
        """Apply the alternate caller's diplotypes for this gene."""
        if self._has_alternate_call:
            raise DuplicateCallDataError(self._gene, CallSource.ALTERNATE.value)
        self._check_gene(call)
        self._has_alternate_call = True
        self._add_diplotypes(call.diplotypes, CallSource.ALTERNATE, phenotype_map)

    def diplotype_lookup_keys(self) -> List[str]:
        """One phenotype lookup key per called diplotype."""
        keys = []
        for diplotype in self._diplotypes:
            key = make_lookup_key(self._gene, diplotype)
            if key not in keys:
                keys.append(key)
        return keys

    def tagged_diplotypes(self, alternate_label: str) -> List[str]:
        """Diplotypes with alternate-source entries suffixed by the caller label."""
        return [
            d + (f" ({alternate_label})" if source == CallSource.ALTERNATE else "")
            for d, source in self._diplotypes.items()
        ]

    def add_related_guideline(self, guideline: "GuidelineReport"):
        if guideline not in self._related_guidelines:
            self._related_guidelines.append(guideline)

    def apply_exceptions(self, exceptions: List[GeneException]):
        """Attach exception records for this gene. Display only."""
        for exception in exceptions:
            if exception.gene == self._gene and exception not in self._exceptions:
                self._exceptions.append(exception)

    def _check_gene(self, call: GeneCall):
        if call.gene != self._gene:
            raise ValueError(f"Call for {call.gene} applied to gene report for {self._gene}")

    def _add_diplotypes(self, diplotypes: List[str], source: CallSource, phenotype_map: PhenotypeMap):
        for diplotype in diplotypes:
            if diplotype in self._diplotypes:
                continue
            self._diplotypes[diplotype] = source
            phenotype = phenotype_map.lookup(make_lookup_key(self._gene, diplotype))
            self._phenotypes[diplotype] = phenotype
            if phenotype is None:
                logger.warning("No phenotype for %s %s", self._gene, diplotype)
        logger.debug("%s: %d diplotype(s) from %s call", self._gene, len(diplotypes), source.value)

    def __repr__(self) -> str:
        return f"GeneReport(gene={self._gene!r}, diplotypes={self.diplotypes!r})"
