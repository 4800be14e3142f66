"""Tests for Prometheus metrics."""

from prometheus_client import REGISTRY

from cn_idcard import convert_15_to_18, validate
from cn_idcard.metrics.collectors import CONVERSIONS_TOTAL, VALIDATIONS_TOTAL


def _sample(name: str, result: str) -> float:
    return REGISTRY.get_sample_value(name, {"result": result}) or 0.0


class TestMetricsDefinition:
    """Tests for metrics definition."""

    def test_validations_total_exists(self):
        """Test that VALIDATIONS_TOTAL counter exists."""
        # Prometheus counters internally use _name without _total suffix
        assert "cn_idcard_validations" in VALIDATIONS_TOTAL._name

    def test_conversions_total_exists(self):
        """Test that CONVERSIONS_TOTAL counter exists."""
        assert "cn_idcard_conversions" in CONVERSIONS_TOTAL._name


class TestMetricsRecording:
    """Tests that operations record outcomes."""

    def test_valid_outcome(self):
        before = _sample("cn_idcard_validations_total", "valid")
        validate("11010519491231002X")
        assert _sample("cn_idcard_validations_total", "valid") == before + 1

    def test_failure_outcomes(self):
        cases = {
            "length": "1101",
            "format": "11010519491231A02X",
            "invalid_date": "110105194913310021",
            "checksum_mismatch": "110105194912310021",
        }
        for result, code in cases.items():
            before = _sample("cn_idcard_validations_total", result)
            validate(code)
            assert _sample("cn_idcard_validations_total", result) == before + 1, result

    def test_conversion_outcomes(self):
        converted = _sample("cn_idcard_conversions_total", "converted")
        rejected = _sample("cn_idcard_conversions_total", "rejected")

        convert_15_to_18("110105491231002")
        convert_15_to_18("1101")

        assert _sample("cn_idcard_conversions_total", "converted") == converted + 1
        assert _sample("cn_idcard_conversions_total", "rejected") == rejected + 1
