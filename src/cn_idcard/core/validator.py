"""
身份证号校验与解析

校验 18 位身份证号（长度、出生日期、校验码），并提供出生日期、性别、
年龄的提取，以及 15 位旧版身份证号升级到 18 位。

所有操作都是纯函数：失败时返回 False / None，不抛出异常。
"""

from datetime import date, datetime
from typing import Callable, Optional, Union

from cn_idcard.core.checksum import BODY_LENGTH, compute_checksum, is_digits
from cn_idcard.core.models import Gender, IDCardInfo, IDCode, ValidationError, ValidationResult
from cn_idcard.logging import get_logger
from cn_idcard.metrics.collectors import CONVERSIONS_TOTAL, VALIDATIONS_TOTAL
from cn_idcard.region.lookup import RegionInfo, RegionLookup
from cn_idcard.utils.masking import mask_id_card

logger = get_logger(__name__)

ID_CARD_LENGTH = 18
LEGACY_ID_CARD_LENGTH = 15

# 顺序码 996-999 为百岁以上老人的特殊编码，出生年份按 18xx 处理
CENTENARIAN_SEQUENCES = frozenset({"996", "997", "998", "999"})

# Operations take raw strings or already validated IDCode values
IDCardInput = Union[str, IDCode]


def _as_text(code: IDCardInput) -> str:
    return code.value if isinstance(code, IDCode) else code


def shift_years(value: date, years: int) -> date:
    """Move a date by whole years, rolling Feb 29 onto Mar 1 when needed."""
    year = value.year + years
    try:
        return value.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


class IDCardValidator:
    """Validator and decoder for Chinese Resident Identity Card numbers.

    Example:
        >>> validator = IDCardValidator()
        >>> validator.validate("11010519491231002X")
        True
        >>> validator.convert_15_to_18("110105491231002")
        '11010519491231002X'
    """

    def __init__(
        self,
        region_lookup: Optional[RegionLookup] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        """Initialize the validator.

        Args:
            region_lookup: Optional region lookup used by ``region`` and
                ``parse``. Without one, region data is never resolved.
            clock: Callable returning today's date. Defaults to
                ``date.today``.
        """
        self.region_lookup = region_lookup
        self._clock = clock or date.today

    def today(self) -> date:
        return self._clock()

    def check(self, code: IDCardInput) -> ValidationResult:
        """Check an 18-character ID card number and report the first failure.

        Args:
            code: ID card number. The check character may be lower-case.

        Returns:
            ValidationResult describing the outcome.
        """
        code = _as_text(code)
        result = self._check(code)
        VALIDATIONS_TOTAL.labels(result="valid" if result.is_valid else result.error.value).inc()
        if not result.is_valid:
            logger.debug(
                "ID card rejected",
                extra={"id_card": mask_id_card(code), "reason": result.error.value},
            )
        return result

    def _check(self, code: str) -> ValidationResult:
        if not isinstance(code, str) or len(code) != ID_CARD_LENGTH:
            return ValidationResult(is_valid=False, error=ValidationError.LENGTH)

        body = code[:BODY_LENGTH]
        if not is_digits(body):
            return ValidationResult(is_valid=False, error=ValidationError.FORMAT)

        expected = compute_checksum(body)

        if self.birthday(code) is None:
            return ValidationResult(
                is_valid=False,
                error=ValidationError.INVALID_DATE,
                expected_check_code=expected,
            )

        if code[BODY_LENGTH].upper() != expected:
            return ValidationResult(
                is_valid=False,
                error=ValidationError.CHECKSUM_MISMATCH,
                expected_check_code=expected,
            )

        return ValidationResult(is_valid=True, expected_check_code=expected)

    def validate(self, code: IDCardInput) -> bool:
        """Validate an 18-character ID card number.

        Returns:
            True if the length, birth date and check character are all valid.
        """
        return self.check(code).is_valid

    def compute_checksum(self, body: str) -> Optional[str]:
        """Compute the check character for a 17-digit body."""
        return compute_checksum(body)

    def birthday(self, code: IDCardInput) -> Optional[date]:
        """Extract the birth date from an 18-character number.

        The date must round-trip exactly: month 13, Feb 30 or non-numeric
        fields are rejected instead of being rolled over. The check character
        is not verified here.

        Returns:
            The birth date, or None.
        """
        code = _as_text(code)
        if not isinstance(code, str) or len(code) != ID_CARD_LENGTH:
            return None

        text = f"{code[6:10]}-{code[10:12]}-{code[12:14]}"
        try:
            parsed = datetime.strptime(text, "%Y-%m-%d").date()
        except ValueError:
            return None

        if parsed.isoformat() != text:
            return None
        return parsed

    def gender(self, code: IDCardInput) -> Optional[Gender]:
        """Read the gender digit of a 15- or 18-character number.

        Odd digits are male, even digits female. Returns None for any other
        length or when the gender position is not a digit.
        """
        code = _as_text(code)
        if not isinstance(code, str):
            return None
        if len(code) == ID_CARD_LENGTH:
            digit = code[16]
        elif len(code) == LEGACY_ID_CARD_LENGTH:
            digit = code[14]
        else:
            return None

        if not is_digits(digit):
            return None
        return Gender.MALE if int(digit) % 2 == 1 else Gender.FEMALE

    def convert_15_to_18(self, code: IDCardInput) -> Optional[str]:
        """Upgrade a legacy 15-character number to 18 characters.

        The century "19" is inserted before the two-digit year, except for the
        centenarian sequences 996-999 which get "18".

        Returns:
            The 18-character number, or None if the input is not 15 characters
            or its body is not numeric.
        """
        code = _as_text(code)
        if not isinstance(code, str) or len(code) != LEGACY_ID_CARD_LENGTH:
            CONVERSIONS_TOTAL.labels(result="rejected").inc()
            return None

        century = "18" if code[12:15] in CENTENARIAN_SEQUENCES else "19"
        body = code[:6] + century + code[6:15]

        check_code = compute_checksum(body)
        if check_code is None:
            CONVERSIONS_TOTAL.labels(result="rejected").inc()
            logger.debug("Legacy ID card rejected", extra={"id_card": mask_id_card(code)})
            return None

        CONVERSIONS_TOTAL.labels(result="converted").inc()
        return body + check_code

    def is_meet_age(self, code: IDCardInput, min_age: int) -> bool:
        """Check whether the holder has passed ``min_age`` years.

        Compares the year and the MMDD part as plain integers. The holder
        qualifies once strictly past the birthday in the year they reach
        ``min_age``; the birthday itself does not count.
        """
        code = _as_text(code)
        if not self.validate(code):
            return False

        today = self.today()
        year_diff = today.year - int(code[6:10])
        month_day_diff = int(today.strftime("%m%d")) - int(code[10:14])

        return year_diff > min_age or (year_diff == min_age and month_day_diff > 0)

    def get_age(self, code: IDCardInput) -> Optional[int]:
        """Compute the holder's age in whole years.

        Estimates the age as elapsed days // 365, which can only overshoot
        (years are never shorter than 365 days), then steps back one year if
        the estimated anniversary is still in the future.

        Returns:
            Age in whole years, or None if the number is not valid.
        """
        if not self.validate(code):
            return None
        return self._age(self.birthday(code))

    def _age(self, born: date) -> int:
        today = self.today()
        diff = (today - born).days // 365
        if shift_years(born, diff) > today:
            return diff - 1
        return diff

    def region(self, code: IDCardInput) -> Optional[RegionInfo]:
        """Resolve region metadata for a valid number.

        Returns None when no region lookup is configured, the number is not
        valid, or the region code is unknown.
        """
        code = _as_text(code)
        if self.region_lookup is None or not self.validate(code):
            return None
        return self.region_lookup.lookup(code[:6])

    def parse(self, code: IDCardInput) -> Optional[IDCardInfo]:
        """Decode every field of an ID card number.

        Accepts 18-character numbers and legacy 15-character numbers, which
        are upgraded first.

        Returns:
            IDCardInfo, or None if the (upgraded) number is not valid.
        """
        code = _as_text(code)
        converted_from = None
        if isinstance(code, str) and len(code) == LEGACY_ID_CARD_LENGTH:
            converted_from = code
            code = self.convert_15_to_18(code)
            if code is None:
                return None

        if not self.validate(code):
            return None

        code = code.upper()
        born = self.birthday(code)
        region = self.region_lookup.lookup(code[:6]) if self.region_lookup is not None else None
        return IDCardInfo(
            code=code,
            region_code=code[:6],
            birthday=born,
            gender=self.gender(code),
            age=self._age(born),
            region=region,
            converted_from=converted_from,
        )


default_validator = IDCardValidator()


def validate(code: IDCardInput) -> bool:
    """Validate an 18-character ID card number with the default validator.

    Examples:
        >>> validate("11010519491231002X")
        True
        >>> validate("110105194912310021")
        False
    """
    return default_validator.validate(code)


def check(code: IDCardInput) -> ValidationResult:
    return default_validator.check(code)


def birthday(code: IDCardInput) -> Optional[date]:
    return default_validator.birthday(code)


def gender(code: IDCardInput) -> Optional[Gender]:
    return default_validator.gender(code)


def convert_15_to_18(code: IDCardInput) -> Optional[str]:
    return default_validator.convert_15_to_18(code)


def is_meet_age(code: IDCardInput, min_age: int) -> bool:
    return default_validator.is_meet_age(code, min_age)


def get_age(code: IDCardInput) -> Optional[int]:
    return default_validator.get_age(code)


def parse(code: IDCardInput) -> Optional[IDCardInfo]:
    return default_validator.parse(code)
