# =============================================================================
# File: base_translator.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Shared input side of the dense and sparse translators."""

from typing import Any, Optional

from embed_translator.config.translator_config import Batchifier, TranslatorConfig
from embed_translator.models.model_result import ModelTensors
from embed_translator.services.translator.encoding_adapter import (
    TranslatorInput,
    prepare_model_inputs,
)


class BaseTranslator:
    """
    Converts text into model inputs. Subclasses turn the model outputs into
    results. Configuration is immutable, so one instance can serve
    concurrent calls; all per-call state lives in the TranslatorInput.
    """

    def __init__(self, tokenizer: Any, config: Optional[TranslatorConfig] = None):
        self.tokenizer = tokenizer
        self.config = config or TranslatorConfig()

    @property
    def batchifier(self) -> Batchifier:
        return self.config.batchifier

    def process_input(self, text: str) -> TranslatorInput:
        return prepare_model_inputs(text, self.tokenizer, self.config)

    def to_model_tensors(self, result: Any) -> ModelTensors:
        """Wrap a process_output result for the serialization boundary."""
        raise NotImplementedError
