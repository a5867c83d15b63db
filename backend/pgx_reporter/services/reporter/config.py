"""
Configuration for the reporter matching engine.
Centralizes tunable parameters for genotype combination and match reporting.
"""

import json
from enum import Enum
from pydantic import BaseModel, Field


class CombineStrategy(str, Enum):
    """How an accumulated combined genotype is merged with the next gene's phenotype."""
    SORTED = "sorted"  # Split prior combinations into tokens, full n-way sort
    PAIRWISE = "pairwise"  # Prior combination kept as one opaque token


class UnknownPhenotypeFallback(str, Enum):
    """What translation returns for a lookup key missing from the phenotype map."""
    LOOKUP_KEY = "lookup_key"
    SKIP = "skip"


class ReporterConfig(BaseModel):
    """Main configuration for the reporter."""

    genotype_delimiter: str = Field(
        default=";",
        min_length=1,
        description="Separator between phenotype tokens in a combined genotype"
    )

    combine_strategy: CombineStrategy = Field(
        default=CombineStrategy.SORTED,
        description="Merge strategy for guidelines with three or more genes"
    )

    alternate_source_label: str = Field(
        default="Astrolabe",
        description="Tag appended to diplotypes that came from the alternate caller"
    )

    unknown_phenotype_fallback: UnknownPhenotypeFallback = Field(
        default=UnknownPhenotypeFallback.LOOKUP_KEY,
        description="Behaviour when a diplotype has no phenotype map entry"
    )

    log_zero_match_groups: bool = Field(
        default=True,
        description="Warn about annotation groups that never match in reportable guidelines"
    )

    # Logging
    verbose_logging: bool = Field(
        default=False,
        description="Log per-guideline match details at INFO instead of DEBUG"
    )


# Global configuration instance
_config: ReporterConfig = ReporterConfig()


def get_config() -> ReporterConfig:
    """Get the global configuration instance."""
    return _config


def update_config(**kwargs) -> ReporterConfig:
    """Update configuration parameters."""
    global _config
    current_dict = _config.model_dump()
    current_dict.update(kwargs)
    _config = ReporterConfig(**current_dict)
    return _config


def load_config_from_file(filepath: str) -> ReporterConfig:
    """Load configuration from a JSON file."""
    global _config

    with open(filepath, 'r') as f:
        config_dict = json.load(f)

    _config = ReporterConfig(**config_dict)
    return _config


def save_config_to_file(filepath: str):
    """Save current configuration to a JSON file."""
    with open(filepath, 'w') as f:
        json.dump(_config.model_dump(mode="json"), f, indent=2)


def reset_config() -> ReporterConfig:
    """Restore defaults."""
    global _config
    _config = ReporterConfig()
    return _config
