"""Cosine similarity between embedding vectors."""

import math
from typing import Sequence

from src.errors import InvalidArgumentError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return dot(a, b) / (|a| * |b|), or 0.0 when either vector has zero norm.

    Raises:
        InvalidArgumentError: If the vectors differ in length.
    """
    if len(a) != len(b):
        raise InvalidArgumentError(
            f"Vectors must have the same length for cosine similarity ({len(a)} != {len(b)})."
        )

    dot_product = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot_product += x * y
        norm_a += x * x
        norm_b += y * y

    denominator = math.sqrt(norm_a) * math.sqrt(norm_b)
    if denominator == 0:
        return 0.0
    return dot_product / denominator
