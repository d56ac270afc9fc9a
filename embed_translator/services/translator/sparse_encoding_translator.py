# =============================================================================
# File: sparse_encoding_translator.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from typing import Optional

from embed_translator.models.encoding import Encoding
from embed_translator.models.model_result import ModelTensors
from embed_translator.models.tensor import TensorList
from embed_translator.services.translator.base_translator import BaseTranslator
from embed_translator.services.translator.result_assembler import assemble, sparse_entry
from embed_translator.services.translator.sparse_extraction import extract_sparse_maps


class SparseEncodingTranslator(BaseTranslator):
    """Sparse token weight maps, one result entry per output tensor."""

    @property
    def sparse_encoding_format(self):
        return self.config.sparse_encoding_format

    def to_model_tensors(self, result: ModelTensors) -> ModelTensors:
        return result

    def process_output(
        self, outputs: TensorList, encoding: Optional[Encoding] = None
    ) -> ModelTensors:
        entries = []
        for tensor in outputs:
            maps = extract_sparse_maps(tensor.array, self.sparse_encoding_format, self.tokenizer)
            entries.append(sparse_entry(tensor.name, maps))
        return assemble(entries)
