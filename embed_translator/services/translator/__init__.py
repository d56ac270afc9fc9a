# =============================================================================
# File: __init__.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Pre/post-processing between text and an encoder model.

This package provides the translator stages:
- encoding_adapter: tokenizer output to ordered input tensors
- pooling: MEAN / CLS pooling of hidden states
- normalization: optional L2 normalization
- sparse_extraction: per-token weights to token -> weight maps
- result_assembler: ordered ModelTensors for serialization
- text_embedding_translator / sparse_encoding_translator: the two translators
- predictor: a single encode -> run -> process call

Public API:
- TextEmbeddingTranslator: dense sentence embeddings
- SparseEncodingTranslator: sparse token weight maps
- Predictor: end-to-end inference with a model runner
"""

from embed_translator.services.translator.encoding_adapter import TranslatorInput
from embed_translator.services.translator.predictor import Predictor
from embed_translator.services.translator.sparse_encoding_translator import (
    SparseEncodingTranslator,
)
from embed_translator.services.translator.text_embedding_translator import (
    TextEmbeddingTranslator,
)

__all__ = [
    "Predictor",
    "SparseEncodingTranslator",
    "TextEmbeddingTranslator",
    "TranslatorInput",
]
