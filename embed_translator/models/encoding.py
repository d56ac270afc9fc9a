# =============================================================================
# File: encoding.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from embed_translator.exceptions import InvalidInputError


class Encoding(BaseModel):
    """Tokenizer output for a single input text."""

    model_config = ConfigDict(frozen=True)

    ids: List[int]
    attention_mask: List[int]
    type_ids: Optional[List[int]] = None

    @model_validator(mode="after")
    def _check_lengths(self) -> "Encoding":
        if len(self.attention_mask) != len(self.ids):
            raise InvalidInputError(
                f"Attention mask length {len(self.attention_mask)} does not match "
                f"token id length {len(self.ids)}"
            )
        if self.type_ids is not None and len(self.type_ids) != len(self.ids):
            raise InvalidInputError(
                f"Type id length {len(self.type_ids)} does not match "
                f"token id length {len(self.ids)}"
            )
        return self
