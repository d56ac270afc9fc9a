# =============================================================================
# File: text_embedding_translator.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
from typing import Any, Optional

from numpy import ndarray

from embed_translator.config.translator_config import TranslatorConfig
from embed_translator.exceptions import MissingConfigError
from embed_translator.logger import get_logger
from embed_translator.models.encoding import Encoding
from embed_translator.models.model_result import ModelTensors
from embed_translator.models.tensor import TensorList
from embed_translator.services.translator.base_translator import BaseTranslator
from embed_translator.services.translator.normalization import apply_normalization
from embed_translator.services.translator.pooling import PoolingStrategies
from embed_translator.services.translator.result_assembler import assemble, dense_entry

logger = get_logger("translator.text_embedding")


class TextEmbeddingTranslator(BaseTranslator):
    """Dense sentence embeddings: pooling plus optional L2 normalization."""

    def __init__(self, tokenizer: Any, config: TranslatorConfig):
        if config.pooling_method is None:
            logger.error("Text embedding translator created without a pooling method")
            raise MissingConfigError("Pooling method is required for text embedding")
        super().__init__(tokenizer, config)

    def process_output(self, outputs: TensorList, encoding: Optional[Encoding]) -> ndarray:
        """Pool and optionally normalize the outputs of one input.

        Args:
            outputs: Model outputs for a single input, batch axis removed
            encoding: Encoding returned by process_input for the same call

        Returns:
            Embedding vector of the model's hidden size
        """
        attention_mask = encoding.attention_mask if encoding is not None else None
        pooled = PoolingStrategies.apply(outputs, self.config.pooling_method, attention_mask)
        embedding = apply_normalization(pooled, self.config.normalize_result)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Embedding shape: {embedding.shape}")
        return embedding

    def to_model_tensors(self, embedding: ndarray) -> ModelTensors:
        return assemble([dense_entry(embedding)])
