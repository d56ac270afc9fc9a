# =============================================================================
# File: conftest.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
import os
import tempfile

# Keep log files out of the working tree; must run before package imports.
os.environ.setdefault(
    "EMBED_TRANSLATOR_LOG_DIR", os.path.join(tempfile.gettempdir(), "embed_translator_test_logs")
)

import numpy as np
import pytest

from embed_translator.models.encoding import Encoding

SPECIAL_IDS = {0: "[PAD]", 101: "[CLS]", 102: "[SEP]"}


class FakeTokenizer:
    """Whitespace tokenizer with a fixed vocabulary and BERT-style specials."""

    def __init__(self, vocab=None, type_ids=True):
        self.vocab = vocab or {"hello": 7592, "world": 2088, "foo": 3, "bar": 17}
        self.reverse = {v: k for k, v in self.vocab.items()}
        self.with_type_ids = type_ids
        self.decode_calls = []

    def encode(self, text):
        ids = [101] + [self.vocab[w] for w in text.split()] + [102]
        return Encoding(
            ids=ids,
            attention_mask=[1] * len(ids),
            type_ids=[0] * len(ids) if self.with_type_ids else None,
        )

    def decode(self, indices, skip_special_tokens=True):
        self.decode_calls.append((list(indices), skip_special_tokens))
        parts = []
        for index in indices:
            if index in SPECIAL_IDS:
                if not skip_special_tokens:
                    parts.append(SPECIAL_IDS[index])
                continue
            parts.append(self.reverse.get(index, f"tok{index}"))
        return " ".join(parts)


class _Named:
    def __init__(self, name):
        self.name = name


class FakeSession:
    """onnxruntime.InferenceSession stand-in returning preset outputs."""

    def __init__(self, outputs, input_names=("input_ids", "attention_mask"), output_names=None):
        self._outputs = outputs
        self._input_names = list(input_names)
        self._output_names = list(output_names or ["last_hidden_state"])
        self.feeds = []

    def get_inputs(self):
        return [_Named(n) for n in self._input_names]

    def get_outputs(self):
        return [_Named(n) for n in self._output_names]

    def run(self, output_names, feeds):
        self.feeds.append(feeds)
        if callable(self._outputs):
            return self._outputs(feeds)
        return self._outputs


class FakeRunner:
    """Model runner stand-in: records calls and returns a fixed TensorList."""

    def __init__(self, outputs):
        self.outputs = outputs
        self.calls = []

    def run(self, tensors, batchifier):
        self.calls.append((tensors, batchifier))
        return self.outputs


@pytest.fixture
def tokenizer():
    return FakeTokenizer()


@pytest.fixture(autouse=True, scope="session")
def silence_translator_logs():
    """Raise the package log level so expected errors do not clutter output."""
    logger = logging.getLogger("embed_translator")
    previous = logger.level
    logger.setLevel(logging.CRITICAL)
    yield
    logger.setLevel(previous)


@pytest.fixture
def hidden_states():
    return np.array([[1.0, 1.0], [3.0, 3.0]], dtype=np.float32)
