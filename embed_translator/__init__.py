# =============================================================================
# File: __init__.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Pre/post-processing translators for dense and sparse text encoders."""

from embed_translator.config.translator_config import (
    Batchifier,
    ModelType,
    PoolingMethod,
    SparseEncodingFormat,
    TranslatorConfig,
)
from embed_translator.services.translator import (
    Predictor,
    SparseEncodingTranslator,
    TextEmbeddingTranslator,
)

__all__ = [
    "Batchifier",
    "ModelType",
    "PoolingMethod",
    "Predictor",
    "SparseEncodingFormat",
    "SparseEncodingTranslator",
    "TextEmbeddingTranslator",
    "TranslatorConfig",
]
