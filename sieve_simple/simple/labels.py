"""Label/value helpers."""

from collections.abc import Mapping

from .constants import LABEL_KEYS
from .models import LabelValue


def build_label_value(key: str) -> LabelValue:
    """Wrap a canonical token with its display label ('' when it has none)."""
    return LabelValue(label=LABEL_KEYS.get(key, ""), value=key)


def invert(mapping: Mapping) -> dict:
    """Swap keys and values. Later keys win on duplicate values."""
    return {value: key for key, value in mapping.items()}
