# =============================================================================
# File: pooling.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
from typing import Optional, Sequence, Union

import numpy as np
from numpy import ndarray

from embed_translator.config.translator_config import PoolingMethod
from embed_translator.exceptions import InvalidConfigError, InvalidInputError
from embed_translator.logger import get_logger
from embed_translator.models.tensor import TensorList
from embed_translator.utils.constants import (
    LAST_HIDDEN_STATE_NAME,
    MASK_SUM_EPS,
    MASK_SUM_MAX,
)

logger = get_logger("translator.pooling")

# Token axis of a single example's (seq_len, hidden) output
TOKEN_AXIS = 0


def _drop_batch_dim(hidden_states: ndarray) -> ndarray:
    # (1, seq_len, hidden) -> (seq_len, hidden)
    if hidden_states.ndim == 3 and hidden_states.shape[0] == 1:
        return hidden_states[0]
    return hidden_states


class PoolingStrategies:

    @staticmethod
    def mean_pooling(
        hidden_states: ndarray, attention_mask: Union[ndarray, Sequence[int]]
    ) -> ndarray:
        """Mean of the attended token vectors.

        The mask sum is clipped into [MASK_SUM_EPS, MASK_SUM_MAX], so a fully
        masked input pools to zeros instead of dividing by zero.
        """
        hidden_states = _drop_batch_dim(np.asarray(hidden_states))
        mask = np.asarray(attention_mask).astype(np.float32).reshape(-1)
        if mask.shape[0] != hidden_states.shape[TOKEN_AXIS]:
            raise InvalidInputError(
                f"Attention mask length {mask.shape[0]} does not match "
                f"hidden state tokens {hidden_states.shape[TOKEN_AXIS]}"
            )

        expanded_mask = np.broadcast_to(np.expand_dims(mask, -1), hidden_states.shape)
        mask_sum = expanded_mask.sum(axis=TOKEN_AXIS)
        clamped = np.clip(mask_sum, MASK_SUM_EPS, MASK_SUM_MAX)
        masked_sum = (hidden_states * expanded_mask).sum(axis=TOKEN_AXIS)
        return masked_sum / clamped

    @staticmethod
    def cls_pooling(hidden_states: ndarray) -> ndarray:
        """Hidden state of the first token."""
        return _drop_batch_dim(np.asarray(hidden_states))[0]

    @staticmethod
    def apply(
        outputs: TensorList,
        method: Optional[PoolingMethod],
        attention_mask: Optional[Union[ndarray, Sequence[int]]] = None,
    ) -> ndarray:
        """Pool the model outputs of one input into a single vector.

        MEAN reads the last_hidden_state output (first output if unnamed) and
        needs the attention mask. CLS always reads the first output.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Applying pooling method: {method}")

        if method == PoolingMethod.MEAN:
            hidden = outputs.get(LAST_HIDDEN_STATE_NAME)
            if hidden is None:
                hidden = outputs[0]
            if attention_mask is None:
                raise InvalidInputError("Mean pooling requires the attention mask")
            pooled = PoolingStrategies.mean_pooling(hidden.array, attention_mask)
        elif method == PoolingMethod.CLS:
            pooled = PoolingStrategies.cls_pooling(outputs[0].array)
        else:
            logger.error(f"Unsupported pooling method: {method}")
            raise InvalidConfigError(f"Unsupported pooling method: {method}")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"After pooling: {pooled.shape}")
        return pooled
