# =============================================================================
# File: __init__.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from embed_translator.config.translator_config import (
    TYPE_ID_MODEL_TYPES,
    Batchifier,
    ModelType,
    PoolingMethod,
    SparseEncodingFormat,
    TranslatorConfig,
)

__all__ = [
    "TYPE_ID_MODEL_TYPES",
    "Batchifier",
    "ModelType",
    "PoolingMethod",
    "SparseEncodingFormat",
    "TranslatorConfig",
]
