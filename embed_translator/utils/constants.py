# =============================================================================
# File: constants.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Numeric constants and well-known tensor names.

Keep this module minimal and import-safe to avoid circular imports.
"""

# Clamp bounds for the attention mask sum in mean pooling. The floor keeps
# fully masked inputs finite, the ceiling guards against overflow.
MASK_SUM_EPS: float = 1e-9
MASK_SUM_MAX: float = 1e12

# Order of the norm used when normalizing pooled vectors
NORM_ORDER: int = 2

# Model input names, in the order the translator emits them
INPUT_IDS_NAME: str = "input_ids"
ATTENTION_MASK_NAME: str = "attention_mask"
TOKEN_TYPE_IDS_NAME: str = "token_type_ids"

# Conventional name of the per-token hidden state output
LAST_HIDDEN_STATE_NAME: str = "last_hidden_state"

# Name of the dense embedding result entry
SENTENCE_EMBEDDING_NAME: str = "sentence_embedding"

# Key under which sparse token weight maps are wrapped
ML_MAP_RESPONSE_KEY: str = "response"

DEFAULT_MAX_LENGTH: int = 512
