"""Region-code lookup."""

from cn_idcard.region.lookup import (
    PROVINCE_CODES,
    MappingRegionLookup,
    ProvinceRegionLookup,
    RegionInfo,
    RegionLookup,
)

__all__ = [
    "PROVINCE_CODES",
    "MappingRegionLookup",
    "ProvinceRegionLookup",
    "RegionInfo",
    "RegionLookup",
]
