# =============================================================================
# File: __init__.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from embed_translator.models.encoding import Encoding
from embed_translator.models.model_result import ModelTensor, ModelTensors
from embed_translator.models.tensor import Tensor, TensorList

__all__ = ["Encoding", "ModelTensor", "ModelTensors", "Tensor", "TensorList"]
