"""Core validation and decoding logic."""

from cn_idcard.core.checksum import CHECK_CODES, WEIGHTS, compute_checksum
from cn_idcard.core.models import (
    Gender,
    IDCardInfo,
    IDCode,
    InvalidIDCardError,
    ValidationError,
    ValidationResult,
)
from cn_idcard.core.validator import IDCardValidator, default_validator

__all__ = [
    "CHECK_CODES",
    "WEIGHTS",
    "compute_checksum",
    "Gender",
    "IDCardInfo",
    "IDCode",
    "InvalidIDCardError",
    "ValidationError",
    "ValidationResult",
    "IDCardValidator",
    "default_validator",
]
