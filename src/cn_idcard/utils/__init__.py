"""Utility functions."""

from cn_idcard.utils.masking import mask_id_card

__all__ = ["mask_id_card"]
