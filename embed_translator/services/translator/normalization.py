# =============================================================================
# File: normalization.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import numpy as np
from numpy import ndarray

from embed_translator.logger import get_logger
from embed_translator.utils.constants import NORM_ORDER

logger = get_logger("translator.normalization")


def normalize_vector(embedding: ndarray) -> ndarray:
    """L2 normalize a pooled vector along its feature axis.

    A zero vector yields NaN components; it is logged, not masked.
    """
    norm = np.linalg.norm(embedding, ord=NORM_ORDER, axis=-1, keepdims=True)
    if not np.all(norm):
        logger.warning("Normalizing a zero-norm vector, result is not finite")
    with np.errstate(divide="ignore", invalid="ignore"):
        return embedding / norm


def apply_normalization(embedding: ndarray, normalize: bool) -> ndarray:
    if not normalize:
        return embedding
    return normalize_vector(embedding)
