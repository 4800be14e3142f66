"""Data models for ID card validation and decoding."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from cn_idcard.region.lookup import RegionInfo


class Gender(str, Enum):
    """Gender encoded by the parity of the last sequence digit."""

    MALE = "male"
    FEMALE = "female"


class ValidationError(str, Enum):
    """Reasons an ID card number fails validation.

    Checks run in declaration order, so the first failing check is reported.
    """

    LENGTH = "length"
    FORMAT = "format"
    INVALID_DATE = "invalid_date"
    CHECKSUM_MISMATCH = "checksum_mismatch"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking an 18-character ID card number.

    Attributes:
        is_valid: Whether every check passed.
        error: The first failed check, or None when valid.
        expected_check_code: The check character computed from the body,
            when the body could be read.
    """

    is_valid: bool
    error: Optional[ValidationError] = None
    expected_check_code: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


class InvalidIDCardError(ValueError):
    """Raised by IDCode.parse when the input is not a valid ID card number."""

    def __init__(self, reason: ValidationError, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message or f"Invalid ID card number: {reason.value}")


@dataclass(frozen=True)
class IDCode:
    """A validated 18-character ID card number.

    The value is checked on construction, so code holding an IDCode never
    needs to re-check it. Every validator operation accepts an IDCode in
    place of a string.

    Example:
        >>> code = IDCode.parse("11010519491231002x")
        >>> code.value
        '11010519491231002X'
        >>> code.birthday
        datetime.date(1949, 12, 31)
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the value and normalise the check character.

        Raises:
            InvalidIDCardError: If the value fails any check.
        """
        from cn_idcard.core.validator import default_validator

        if isinstance(self.value, IDCode):
            object.__setattr__(self, "value", self.value.value)

        result = default_validator.check(self.value)
        if not result.is_valid:
            raise InvalidIDCardError(result.error)
        object.__setattr__(self, "value", self.value.upper())

    @classmethod
    def parse(cls, raw: str) -> "IDCode":
        """Validate ``raw`` and wrap it.

        Raises:
            InvalidIDCardError: If ``raw`` fails any check.
        """
        if isinstance(raw, IDCode):
            return raw
        return cls(raw)

    @classmethod
    def try_parse(cls, raw: str) -> Optional["IDCode"]:
        """Like ``parse`` but returns None instead of raising."""
        try:
            return cls.parse(raw)
        except InvalidIDCardError:
            return None

    @property
    def region_code(self) -> str:
        return self.value[:6]

    @property
    def birth_date_text(self) -> str:
        """Birth date as it appears in the number (YYYYMMDD)."""
        return self.value[6:14]

    @property
    def sequence(self) -> str:
        return self.value[14:17]

    @property
    def check_code(self) -> str:
        return self.value[17]

    @property
    def birthday(self) -> date:
        from cn_idcard.core.validator import default_validator

        return default_validator.birthday(self)

    @property
    def gender(self) -> Gender:
        from cn_idcard.core.validator import default_validator

        return default_validator.gender(self)

    def __str__(self) -> str:
        return self.value


@dataclass
class IDCardInfo:
    """Everything that can be decoded from a valid ID card number.

    Attributes:
        code: The 18-character number (upper-cased).
        region_code: First six digits.
        birthday: Date of birth.
        gender: Gender from the sequence parity.
        age: Whole years as of the validator's clock.
        region: Region metadata, if a region lookup was available.
        converted_from: The original 15-character number, when the input was
            upgraded.
    """

    code: str
    region_code: str
    birthday: date
    gender: Gender
    age: int
    region: Optional[RegionInfo] = None
    converted_from: Optional[str] = None
