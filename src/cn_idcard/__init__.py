"""
cn-idcard: Chinese Resident Identity Card number validation

Validates 18-character ID card numbers against GB 11643-1999, decodes birth
date, gender and age, and upgrades legacy 15-character numbers.
"""

__version__ = "1.0.0"

from cn_idcard.core.checksum import compute_checksum
from cn_idcard.core.models import (
    Gender,
    IDCardInfo,
    IDCode,
    InvalidIDCardError,
    ValidationError,
    ValidationResult,
)
from cn_idcard.core.validator import (
    IDCardValidator,
    birthday,
    check,
    convert_15_to_18,
    gender,
    get_age,
    is_meet_age,
    parse,
    validate,
)
from cn_idcard.region.lookup import (
    MappingRegionLookup,
    ProvinceRegionLookup,
    RegionInfo,
    RegionLookup,
)

__all__ = [
    "IDCardValidator",
    "IDCode",
    "IDCardInfo",
    "Gender",
    "InvalidIDCardError",
    "ValidationError",
    "ValidationResult",
    "RegionInfo",
    "RegionLookup",
    "ProvinceRegionLookup",
    "MappingRegionLookup",
    "birthday",
    "check",
    "compute_checksum",
    "convert_15_to_18",
    "gender",
    "get_age",
    "is_meet_age",
    "parse",
    "validate",
]
