"""Pytest fixtures and configuration."""

from datetime import date

import pytest

from cn_idcard.core.validator import IDCardValidator


@pytest.fixture
def valid_id_cards():
    """Valid 18-character ID card numbers for testing."""
    # Note: These are test numbers with valid checksums
    return [
        "11010519491231002X",  # Beijing Chaoyang, 1949-12-31, X checksum
        "110101199003077758",  # Beijing Dongcheng, 1990-03-07
        "110105200002290021",  # Leap day birthday
        "110105180512319968",  # Upgraded centenarian number
    ]


@pytest.fixture
def invalid_id_cards():
    """Invalid ID card numbers for testing."""
    return [
        "110105194912310021",  # Wrong checksum
        "110105194913310021",  # Month 13, checksum otherwise correct
        "110105194902300020",  # Feb 30, checksum otherwise correct
        "110105190002290025",  # 1900 is not a leap year
        "11010519491231A02X",  # Letter in the body
        "11010519491231002",   # Too short
        "11010519491231002X0",  # Too long
        "",
    ]


@pytest.fixture
def fixed_today():
    return date(2026, 10, 19)


@pytest.fixture
def make_validator():
    """Build a validator whose clock is pinned to a given date."""

    def _make(today: date, **kwargs) -> IDCardValidator:
        return IDCardValidator(clock=lambda: today, **kwargs)

    return _make
