"""Configuration module for cn-idcard."""

from cn_idcard.config.region_loader import (
    get_region_lookup,
    load_regions_from_yaml,
    load_regions_from_yaml_safe,
    reset_region_lookup,
)

__all__ = [
    "get_region_lookup",
    "load_regions_from_yaml",
    "load_regions_from_yaml_safe",
    "reset_region_lookup",
]
