# =============================================================================
# File: test_sparse_extraction.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import numpy as np
import pytest

from embed_translator.config.translator_config import SparseEncodingFormat
from embed_translator.exceptions import InvalidConfigError, InvalidInputError
from embed_translator.services.translator.sparse_extraction import (
    extract_sparse_maps,
    extract_token_weights,
)


def _row(size, weights):
    row = np.zeros(size, dtype=np.float32)
    for index, value in weights.items():
        row[index] = value
    return row


def test_int_format_keys_are_indices():
    row = _row(32, {3: 0.5, 17: 1.25})

    result = extract_token_weights(row, SparseEncodingFormat.INT)

    assert result == {"3": 0.5, "17": 1.25}


def test_int_format_does_not_decode(tokenizer):
    extract_token_weights(_row(8, {3: 0.5}), SparseEncodingFormat.INT, tokenizer)
    assert tokenizer.decode_calls == []


def test_word_format_decodes_single_indices(tokenizer):
    row = _row(8000, {7592: 0.75, 2088: 0.25})

    result = extract_token_weights(row, SparseEncodingFormat.WORD, tokenizer)

    assert result == {"hello": 0.75, "world": 0.25}
    assert ([2088], True) in tokenizer.decode_calls
    assert ([7592], True) in tokenizer.decode_calls


def test_word_format_drops_special_tokens(tokenizer):
    row = _row(200, {0: 0.1, 101: 0.9, 102: 0.3, 17: 0.4})

    result = extract_token_weights(row, SparseEncodingFormat.WORD, tokenizer)

    assert result == {"bar": pytest.approx(0.4)}


def test_negative_weights_kept():
    result = extract_token_weights(_row(5, {1: -0.5}), SparseEncodingFormat.INT)
    assert result == {"1": -0.5}


def test_all_zero_row():
    assert extract_token_weights(np.zeros(10), SparseEncodingFormat.INT) == {}


def test_word_format_requires_tokenizer():
    with pytest.raises(InvalidConfigError):
        extract_token_weights(_row(5, {1: 1.0}), SparseEncodingFormat.WORD, None)


def test_one_map_per_row():
    weights = np.stack([_row(6, {1: 1.0}), _row(6, {2: 2.0, 5: 0.5})])

    maps = extract_sparse_maps(weights, SparseEncodingFormat.INT)

    assert maps == [{"1": 1.0}, {"2": 2.0, "5": 0.5}]


def test_single_row_tensor():
    assert extract_sparse_maps(_row(4, {0: 1.0}), SparseEncodingFormat.INT) == [{"0": 1.0}]


def test_rejects_high_rank_tensor():
    with pytest.raises(InvalidInputError):
        extract_sparse_maps(np.ones((2, 2, 2)), SparseEncodingFormat.INT)
