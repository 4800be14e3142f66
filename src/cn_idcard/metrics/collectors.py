"""Prometheus metrics collectors for cn-idcard.

The library never exposes these itself; embedding applications serve the
default registry however they already do.
"""

from prometheus_client import Counter

# Validation outcomes: "valid" or a ValidationError value
VALIDATIONS_TOTAL = Counter(
    "cn_idcard_validations_total",
    "Total ID card validations by outcome",
    ["result"],
)

# 15 -> 18 upgrades: "converted" or "rejected"
CONVERSIONS_TOTAL = Counter(
    "cn_idcard_conversions_total",
    "Total legacy ID card conversions by outcome",
    ["result"],
)
