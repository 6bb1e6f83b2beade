"""Service layer helpers."""

from .names import normalize_name
from .scores import (
    clamp_limit,
    coerce_score,
    get_best,
    record_to_dict,
    submit_score,
    top_scores,
)

__all__ = [
    "clamp_limit",
    "coerce_score",
    "get_best",
    "normalize_name",
    "record_to_dict",
    "submit_score",
    "top_scores",
]
