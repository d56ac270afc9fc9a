# =============================================================================
# File: test_result_assembler.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import numpy as np
import pytest

from embed_translator.models.model_result import ModelTensors
from embed_translator.services.translator.result_assembler import (
    assemble,
    dense_entry,
    sparse_entry,
)


def test_dense_entry():
    entry = dense_entry(np.array([0.5, 0.25], dtype=np.float32))
    assert entry.name == "sentence_embedding"
    assert entry.data_type == "FLOAT32"
    assert entry.shape == [2]
    assert entry.data == [0.5, 0.25]


@pytest.mark.parametrize("dtype", [np.float64, np.float16])
def test_dense_entry_reports_float32(dtype):
    entry = dense_entry(np.array([0.5, 0.25], dtype=dtype))
    assert entry.data_type == "FLOAT32"
    assert entry.data == [0.5, 0.25]


def test_sparse_entry_wraps_maps():
    entry = sparse_entry("output", [{"hello": 1.5}])
    assert entry.name == "output"
    assert entry.data_as_map == {"response": [{"hello": 1.5}]}
    assert entry.data is None


def test_assemble_preserves_order():
    result = assemble([sparse_entry("b", [{}]), sparse_entry("a", [{}])])
    assert [t.name for t in result.tensors] == ["b", "a"]
    assert result.get("a") is result.tensors[1]
    assert result.get("missing") is None


def test_to_bytes_is_json():
    result = assemble([sparse_entry("output", [{"3": 0.5}])])
    payload = result.to_bytes()
    assert isinstance(payload, bytes)
    assert b'"response"' in payload
    assert ModelTensors.from_bytes(payload) == result
