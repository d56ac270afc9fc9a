# =============================================================================
# File: result_assembler.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Packaging of dense vectors and sparse maps into ModelTensors."""

from typing import Dict, Iterable, List, Optional

import numpy as np
from numpy import ndarray

from embed_translator.models.model_result import ModelTensor, ModelTensors
from embed_translator.utils.constants import ML_MAP_RESPONSE_KEY, SENTENCE_EMBEDDING_NAME


def dense_entry(vector: ndarray, name: str = SENTENCE_EMBEDDING_NAME) -> ModelTensor:
    """Dense result entry; values are reported as FLOAT32 whatever the model dtype."""
    vector = np.asarray(vector, dtype=np.float32)
    return ModelTensor(
        name=name,
        data_type="FLOAT32",
        shape=list(vector.shape),
        data=vector.astype(float).ravel().tolist(),
    )


def sparse_entry(name: Optional[str], token_weight_maps: List[Dict[str, float]]) -> ModelTensor:
    return ModelTensor(name=name, data_as_map={ML_MAP_RESPONSE_KEY: token_weight_maps})


def assemble(entries: Iterable[ModelTensor]) -> ModelTensors:
    """Ordered result, entries kept in the order given."""
    return ModelTensors(tensors=list(entries))
