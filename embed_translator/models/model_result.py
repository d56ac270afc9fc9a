# =============================================================================
# File: model_result.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Ordered model results handed to the serialization boundary."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ModelTensor(BaseModel):
    """One named result entry: a dense vector or a wrapped map."""

    name: Optional[str] = None
    data_type: Optional[str] = None
    shape: Optional[List[int]] = None
    data: Optional[List[float]] = None
    data_as_map: Optional[Dict[str, Any]] = None


class ModelTensors(BaseModel):
    """Ordered result entries, in source tensor order."""

    tensors: List[ModelTensor] = Field(default_factory=list)

    def to_bytes(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")

    @classmethod
    def from_bytes(cls, payload: bytes) -> "ModelTensors":
        return cls.model_validate_json(payload)

    def get(self, name: str) -> Optional[ModelTensor]:
        for tensor in self.tensors:
            if tensor.name == name:
                return tensor
        return None
