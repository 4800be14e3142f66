"""Prometheus metrics module for cn-idcard."""

from cn_idcard.metrics.collectors import CONVERSIONS_TOTAL, VALIDATIONS_TOTAL

__all__ = [
    "VALIDATIONS_TOTAL",
    "CONVERSIONS_TOTAL",
]
