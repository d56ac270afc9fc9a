# =============================================================================
# File: sparse_extraction.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Per-token weight tensors to sparse token -> weight maps."""

import logging
from typing import Any, Dict, List, Optional

import numpy as np
from numpy import ndarray

from embed_translator.config.translator_config import SparseEncodingFormat
from embed_translator.exceptions import InvalidConfigError, InvalidInputError
from embed_translator.logger import get_logger

logger = get_logger("translator.sparse_extraction")


def token_key(index: int, fmt: SparseEncodingFormat, tokenizer: Optional[Any]) -> str:
    """Map key for a vocabulary index: its decimal form, or its decoded token."""
    if fmt == SparseEncodingFormat.INT:
        return str(index)
    if fmt == SparseEncodingFormat.WORD:
        if tokenizer is None:
            raise InvalidConfigError("WORD sparse format requires a tokenizer")
        return tokenizer.decode([index], skip_special_tokens=True)
    raise InvalidConfigError(f"Unsupported sparse encoding format: {fmt}")


def extract_token_weights(
    row: ndarray, fmt: SparseEncodingFormat, tokenizer: Optional[Any] = None
) -> Dict[str, float]:
    """Sparse map of one vocabulary-sized row.

    Only non-zero positions are kept; tokens that decode to an empty string
    (special tokens) are dropped.
    """
    token_weights: Dict[str, float] = {}
    for index in np.flatnonzero(row):
        key = token_key(int(index), fmt, tokenizer)
        if key:
            token_weights[key] = float(row[index])
    return token_weights


def extract_sparse_maps(
    weights: ndarray, fmt: SparseEncodingFormat, tokenizer: Optional[Any] = None
) -> List[Dict[str, float]]:
    """One token weight map per row of a (vocab,) or (rows, vocab) tensor."""
    weights = np.asarray(weights)
    if weights.ndim == 1:
        rows = weights[None, :]
    elif weights.ndim == 2:
        rows = weights
    elif weights.ndim == 3 and weights.shape[0] == 1:
        rows = weights[0]
    else:
        raise InvalidInputError(
            f"Expected a (vocab,) or (rows, vocab) weight tensor, got shape {weights.shape}"
        )

    maps = [extract_token_weights(row, fmt, tokenizer) for row in rows]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Extracted sparse maps with sizes {[len(m) for m in maps]}")
    return maps
