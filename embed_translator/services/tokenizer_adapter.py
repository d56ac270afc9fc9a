# =============================================================================
# File: tokenizer_adapter.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""HuggingFace tokenizer exposed through the encode/decode capability."""

import os
from typing import Any, Sequence

from transformers import AutoTokenizer

from embed_translator.exceptions import TokenizerError
from embed_translator.logger import get_logger
from embed_translator.models.encoding import Encoding
from embed_translator.utils.constants import DEFAULT_MAX_LENGTH

logger = get_logger("tokenizer_adapter")


class HuggingFaceTokenizerAdapter:

    def __init__(self, tokenizer: Any, max_length: int = DEFAULT_MAX_LENGTH):
        self.tokenizer = tokenizer
        self.max_length = max_length

    @classmethod
    def from_pretrained(
        cls, tokenizer_path: str, max_length: int = DEFAULT_MAX_LENGTH
    ) -> "HuggingFaceTokenizerAdapter":
        """Load a tokenizer from a local directory or a hub name."""
        try:
            if os.path.exists(tokenizer_path):
                tokenizer = AutoTokenizer.from_pretrained(tokenizer_path, local_files_only=True)
            else:
                logger.info(f"{tokenizer_path} is not a local path, loading from hub")
                tokenizer = AutoTokenizer.from_pretrained(tokenizer_path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load tokenizer from {tokenizer_path}: {e}")
            raise TokenizerError(f"Failed to load tokenizer from {tokenizer_path}: {e}")
        return cls(tokenizer, max_length)

    def encode(self, text: str) -> Encoding:
        encoded = self.tokenizer(
            text,
            truncation=True,
            max_length=self.max_length,
            return_attention_mask=True,
            return_token_type_ids=True,
        )
        type_ids = encoded.get("token_type_ids")
        return Encoding(
            ids=list(encoded["input_ids"]),
            attention_mask=list(encoded["attention_mask"]),
            type_ids=list(type_ids) if type_ids is not None else None,
        )

    def decode(self, indices: Sequence[int], skip_special_tokens: bool = True) -> str:
        return self.tokenizer.decode(list(indices), skip_special_tokens=skip_special_tokens)
