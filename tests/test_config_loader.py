# =============================================================================
# File: test_config_loader.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import json

import pytest

from embed_translator.config.config_loader import ConfigLoader
from embed_translator.config.translator_config import (
    ModelType,
    PoolingMethod,
    SparseEncodingFormat,
)
from embed_translator.exceptions import InvalidConfigError, MissingConfigError

ENV_VARS = [
    "EMBED_TRANSLATOR_CONFIG_FILE",
    "EMBED_TRANSLATOR_BATCHIFIER",
    "EMBED_TRANSLATOR_POOLING_METHOD",
    "EMBED_TRANSLATOR_NORMALIZE_RESULT",
    "EMBED_TRANSLATOR_MODEL_TYPE",
    "EMBED_TRANSLATOR_NEURON",
    "EMBED_TRANSLATOR_SPARSE_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_from_file(tmp_path):
    path = tmp_path / "translator.json"
    path.write_text(json.dumps({"poolingMethod": "cls", "normalizeResult": True}))

    config = ConfigLoader.load_translator_config(str(path))

    assert config.pooling_method == PoolingMethod.CLS
    assert config.normalize_result is True


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "translator.json"
    path.write_text(json.dumps({"poolingMethod": "cls", "sparseEncodingFormat": "word"}))
    monkeypatch.setenv("EMBED_TRANSLATOR_CONFIG_FILE", str(path))
    monkeypatch.setenv("EMBED_TRANSLATOR_POOLING_METHOD", "mean")
    monkeypatch.setenv("EMBED_TRANSLATOR_SPARSE_FORMAT", "INT")
    monkeypatch.setenv("EMBED_TRANSLATOR_NEURON", "1")

    config = ConfigLoader.load_translator_config()

    assert config.pooling_method == PoolingMethod.MEAN
    assert config.sparse_encoding_format == SparseEncodingFormat.INT
    assert config.neuron is True


def test_no_file_uses_defaults():
    config = ConfigLoader.load_translator_config()
    assert config.pooling_method is None
    assert config.sparse_encoding_format == SparseEncodingFormat.WORD


def test_missing_file(tmp_path):
    with pytest.raises(MissingConfigError):
        ConfigLoader.load_translator_config(str(tmp_path / "absent.json"))


def test_malformed_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(InvalidConfigError):
        ConfigLoader.load_translator_config(str(path))


def test_non_object_file(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    with pytest.raises(InvalidConfigError):
        ConfigLoader.load_translator_config(str(path))


def test_model_type_from_hf_config(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"model_type": "albert"}))
    assert ConfigLoader.model_type_from_hf_config(str(tmp_path)) == ModelType.ALBERT


def test_model_type_from_hf_config_absent(tmp_path):
    assert ConfigLoader.model_type_from_hf_config(str(tmp_path)) is None


def test_model_type_from_hf_config_unlisted_family(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"model_type": "nomic_bert"}))
    assert ConfigLoader.model_type_from_hf_config(str(tmp_path)) == ModelType.OTHER


def test_invalid_flag_from_env(monkeypatch):
    monkeypatch.setenv("EMBED_TRANSLATOR_NORMALIZE_RESULT", "enabled")
    with pytest.raises(InvalidConfigError):
        ConfigLoader.load_translator_config()
