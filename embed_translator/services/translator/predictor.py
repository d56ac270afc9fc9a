# =============================================================================
# File: predictor.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""One inference call: encode, run the model, process the outputs."""

from typing import Any, List, Sequence

from embed_translator.logger import get_logger
from embed_translator.models.model_result import ModelTensors

logger = get_logger("translator.predictor")


class Predictor:
    """Runs a translator against a model runner.

    The runner is any object with run(TensorList, batchifier) -> TensorList,
    normally an OnnxModelRunner. Errors from the tokenizer or the runner
    propagate unchanged.
    """

    def __init__(self, translator: Any, runner: Any):
        self.translator = translator
        self.runner = runner

    def predict(self, text: str) -> Any:
        model_input = self.translator.process_input(text)
        outputs = self.runner.run(model_input.tensors, self.translator.batchifier)
        return self.translator.process_output(outputs, model_input.encoding)

    def batch_predict(self, texts: Sequence[str]) -> List[Any]:
        logger.debug(f"Predicting {len(texts)} texts")
        return [self.predict(text) for text in texts]

    def predict_model_tensors(self, text: str) -> ModelTensors:
        """Like predict, with dense embeddings wrapped into ModelTensors."""
        return self.translator.to_model_tensors(self.predict(text))
