# =============================================================================
# File: encoding_adapter.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Tokenizer output to ordered model input tensors."""

import logging
from typing import Any, NamedTuple

import numpy as np

from embed_translator.config.translator_config import TranslatorConfig
from embed_translator.logger import get_logger
from embed_translator.models.encoding import Encoding
from embed_translator.models.tensor import Tensor, TensorList
from embed_translator.utils.constants import (
    ATTENTION_MASK_NAME,
    INPUT_IDS_NAME,
    TOKEN_TYPE_IDS_NAME,
)

logger = get_logger("translator.encoding_adapter")


class TranslatorInput(NamedTuple):
    """Model inputs for one call, plus the encoding they came from.

    The encoding travels with the call so output processing can read the
    attention mask without re-tokenizing.
    """

    tensors: TensorList
    encoding: Encoding


def encoding_to_tensors(encoding: Encoding, config: TranslatorConfig) -> TensorList:
    """Build [input_ids, attention_mask(, token_type_ids)] as int64 tensors.

    token_type_ids is only added for compact (neuron) execution of the
    model families in TYPE_ID_MODEL_TYPES; other graphs do not declare it.
    """
    tensors = TensorList()
    tensors.add(Tensor(np.asarray(encoding.ids, dtype=np.int64), INPUT_IDS_NAME))
    tensors.add(
        Tensor(np.asarray(encoding.attention_mask, dtype=np.int64), ATTENTION_MASK_NAME)
    )

    if config.requires_type_ids:
        if encoding.type_ids is not None:
            type_ids = np.asarray(encoding.type_ids, dtype=np.int64)
        else:
            logger.debug("Tokenizer returned no type ids, using zeros")
            type_ids = np.zeros(len(encoding.ids), dtype=np.int64)
        tensors.add(Tensor(type_ids, TOKEN_TYPE_IDS_NAME))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Prepared model inputs: {tensors.names}, seq_len={len(encoding.ids)}")
    return tensors


def prepare_model_inputs(
    text: str, tokenizer: Any, config: TranslatorConfig
) -> TranslatorInput:
    """Tokenize one text and build its model inputs.

    Args:
        text: Input text
        tokenizer: Object with encode(text) -> Encoding
        config: Translator configuration

    Returns:
        TranslatorInput holding the tensors and the retained encoding
    """
    encoding = tokenizer.encode(text)
    return TranslatorInput(encoding_to_tensors(encoding, config), encoding)
