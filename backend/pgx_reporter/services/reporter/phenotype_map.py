"""
Phenotype Map - read-only diplotype to phenotype translation table.

Keys are diplotype lookup keys of the form "GENE:*1/*2". A map is built once
and passed explicitly to the components that translate, so independent report
contexts never share mutable lookup state.
"""

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_STAR_NUMBER = re.compile(r"^\*?(\d+)(.*)$")


def _allele_sort_key(allele: str) -> Tuple:
    """Natural star-allele order: *1 < *2 < *10 < *10x2 < named alleles."""
    match = _STAR_NUMBER.match(allele.strip())
    if match:
        return (0, int(match.group(1)), match.group(2))
    return (1, 0, allele.strip())


def normalize_diplotype(diplotype: str) -> str:
    """Put the two haplotypes of a diplotype in natural order ("*2/*1" -> "*1/*2")."""
    parts = [p.strip() for p in diplotype.split("/")]
    if len(parts) != 2:
        return diplotype.strip()
    return "/".join(sorted(parts, key=_allele_sort_key))


def make_lookup_key(gene: str, diplotype: str) -> str:
    """Build the phenotype lookup key for a gene diplotype."""
    return f"{gene}:{normalize_diplotype(diplotype)}"


def _put_entry(entries: Dict[str, str], key: str, phenotype: str):
    """Add a normalized entry; equivalent diplotypes must agree on the phenotype."""
    existing = entries.get(key)
    if existing is not None and existing != phenotype:
        raise ValueError(f"Conflicting phenotypes for {key}: {existing!r} and {phenotype!r}")
    entries[key] = phenotype


class PhenotypeMap:
    """Immutable lookup from diplotype lookup key to phenotype string."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        normalized: Dict[str, str] = {}
        for key, phenotype in (entries or {}).items():
            gene, sep, diplotype = key.partition(":")
            if not sep:
                raise ValueError(f"Phenotype map key must look like GENE:diplotype, got {key!r}")
            _put_entry(normalized, make_lookup_key(gene, diplotype), phenotype)
        self._entries = MappingProxyType(normalized)

    @classmethod
    def from_gene_tables(cls, tables: Mapping[str, Mapping[str, str]]) -> "PhenotypeMap":
        """
        Build from per-gene tables shaped like the CPIC cache:
        {"CYP2C19": {"*1/*2": "Intermediate Metabolizer", ...}, ...}
        """
        entries: Dict[str, str] = {}
        for gene, table in tables.items():
            for diplotype, phenotype in table.items():
                _put_entry(entries, make_lookup_key(gene, diplotype), phenotype)
        return cls(entries)

    @classmethod
    def from_json_file(cls, filepath) -> "PhenotypeMap":
        """Load per-gene tables from a JSON file (optionally nested under "genes")."""
        path = Path(filepath)
        with open(path, 'r') as f:
            data = json.load(f)

        genes = data.get("genes", data)
        tables = {}
        for gene, gene_data in genes.items():
            if isinstance(gene_data, dict) and "phenotype_map" in gene_data:
                tables[gene] = gene_data["phenotype_map"]
            else:
                tables[gene] = gene_data

        phenotype_map = cls.from_gene_tables(tables)
        logger.info("Loaded phenotype map from %s: %d entries", path.name, len(phenotype_map))
        return phenotype_map

    def lookup(self, lookup_key: str) -> Optional[str]:
        gene, _, diplotype = lookup_key.partition(":")
        return self._entries.get(make_lookup_key(gene, diplotype))

    def genes(self) -> Iterable[str]:
        return sorted({key.split(":", 1)[0] for key in self._entries})

    def __contains__(self, lookup_key: str) -> bool:
        return self.lookup(lookup_key) is not None

    def __len__(self) -> int:
        return len(self._entries)
