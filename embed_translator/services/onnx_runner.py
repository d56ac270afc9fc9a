# =============================================================================
# File: onnx_runner.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""ONNX Runtime session exposed as a TensorList -> TensorList runner."""

import logging
from typing import Any, List, Optional, Sequence

import numpy as np
import onnxruntime as ort

from embed_translator.config.translator_config import Batchifier
from embed_translator.exceptions import InvalidInputError, ModelLoadError
from embed_translator.logger import get_logger
from embed_translator.models.tensor import Tensor, TensorList

logger = get_logger("onnx_runner")


def _find_matching_input(name: Optional[str], model_input_names: List[str]) -> Optional[str]:
    """Exact, then case-insensitive, match of a tensor name against model inputs."""
    if not name:
        return None
    if name in model_input_names:
        return name
    name_lower = name.lower()
    for model_name in model_input_names:
        if model_name.lower() == name_lower:
            return model_name
    return None


class OnnxModelRunner:

    def __init__(self, session: Any):
        self.session = session
        self.input_names = [inp.name for inp in session.get_inputs()]
        self.output_names = [out.name for out in session.get_outputs()]

    @classmethod
    def from_path(
        cls, model_path: str, provider: str = "CPUExecutionProvider"
    ) -> "OnnxModelRunner":
        available_providers = ort.get_available_providers()
        if provider not in available_providers:
            fallback = (
                "CPUExecutionProvider"
                if "CPUExecutionProvider" in available_providers
                else available_providers[0]
            )
            logger.warning(f"Provider {provider} not available, using {fallback}")
            provider = fallback
        try:
            session = ort.InferenceSession(model_path, providers=[provider])
        except Exception as e:
            logger.error(f"Failed to create ONNX session for {model_path}: {e}")
            raise ModelLoadError(f"Failed to create ONNX session for {model_path}: {e}")
        return cls(session)

    def _feeds(self, tensors: TensorList, arrays: Sequence[np.ndarray]) -> dict:
        feeds = {}
        for position, (tensor, array) in enumerate(zip(tensors, arrays)):
            name = _find_matching_input(tensor.name, self.input_names)
            if name is None:
                if position >= len(self.input_names):
                    raise InvalidInputError(
                        f"Model declares {len(self.input_names)} inputs, got {len(tensors)}"
                    )
                name = self.input_names[position]
            feeds[name] = array
        return feeds

    def _outputs(self, raw_outputs: Sequence[np.ndarray]) -> TensorList:
        names = self.output_names + [None] * (len(raw_outputs) - len(self.output_names))
        return TensorList(Tensor(arr, name) for arr, name in zip(raw_outputs, names))

    def run(self, tensors: TensorList, batchifier: Batchifier = Batchifier.STACK) -> TensorList:
        """Run one example. STACK adds a batch axis and removes it from outputs."""
        if batchifier == Batchifier.STACK:
            arrays = [t.array[None, ...] for t in tensors]
        else:
            arrays = [t.array for t in tensors]

        raw_outputs = self.session.run(None, self._feeds(tensors, arrays))
        if logger.isEnabledFor(logging.DEBUG):
            for name, output in zip(self.output_names, raw_outputs):
                logger.debug(f"ONNX output ({name}): shape={output.shape}, dtype={output.dtype}")

        if batchifier == Batchifier.STACK:
            raw_outputs = [out[0] for out in raw_outputs]
        return self._outputs(raw_outputs)

    def run_batch(self, batch: Sequence[TensorList]) -> List[TensorList]:
        """Stack equally shaped examples into one run and split the outputs."""
        if not batch:
            return []
        first = batch[0]
        try:
            arrays = [
                np.stack([example[i].array for example in batch])
                for i in range(len(first))
            ]
        except ValueError as e:
            raise InvalidInputError(f"Cannot stack examples of different shapes: {e}")

        raw_outputs = self.session.run(None, self._feeds(first, arrays))
        return [
            self._outputs([out[index] for out in raw_outputs]) for index in range(len(batch))
        ]
