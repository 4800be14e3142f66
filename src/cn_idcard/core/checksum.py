"""
身份证校验码计算

根据国家标准 GB 11643-1999（ISO 7064 MOD 11-2）计算 18 位身份证号的最后一位校验码。
"""

from typing import Optional


# 加权因子（对应前 17 位）
WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# 校验码对应值，按 sum % 11 取值
CHECK_CODES = ("1", "0", "X", "9", "8", "7", "6", "5", "4", "3", "2")

BODY_LENGTH = 17

_DIGITS = frozenset("0123456789")


def is_digits(value: str) -> bool:
    """Check that every character is an ASCII decimal digit.

    ``str.isdigit`` also accepts full-width and superscript digits, which
    ``int()`` may not convert the way the checksum expects.
    """
    return bool(value) and all(c in _DIGITS for c in value)


def compute_checksum(body: str) -> Optional[str]:
    """Compute the check character for a 17-digit ID card body.

    Args:
        body: The first 17 characters of an 18-character ID card number.

    Returns:
        The check character ("0"-"9" or "X"), or None if the body is not
        exactly 17 ASCII digits.

    Examples:
        >>> compute_checksum("11010519491231002")
        'X'
        >>> compute_checksum("1101051949123100") is None
        True
    """
    if not isinstance(body, str) or len(body) != BODY_LENGTH:
        return None
    if not is_digits(body):
        return None

    total = sum(int(digit) * weight for digit, weight in zip(body, WEIGHTS))
    return CHECK_CODES[total % 11]
