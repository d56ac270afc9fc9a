# =============================================================================
# File: config_loader.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import json
import os
from typing import Any, Dict, Optional

from embed_translator.config.translator_config import ModelType, TranslatorConfig, parse_model_type
from embed_translator.exceptions import InvalidConfigError, MissingConfigError
from embed_translator.logger import get_logger

logger = get_logger("config_loader")

CONFIG_FILE_ENV = "EMBED_TRANSLATOR_CONFIG_FILE"

# Environment variable -> TranslatorConfig field
ENV_OVERRIDES = {
    "EMBED_TRANSLATOR_BATCHIFIER": "batchifier",
    "EMBED_TRANSLATOR_POOLING_METHOD": "pooling_method",
    "EMBED_TRANSLATOR_NORMALIZE_RESULT": "normalize_result",
    "EMBED_TRANSLATOR_MODEL_TYPE": "model_type",
    "EMBED_TRANSLATOR_NEURON": "neuron",
    "EMBED_TRANSLATOR_SPARSE_FORMAT": "sparse_encoding_format",
}


class ConfigLoader:

    @staticmethod
    def load_translator_config(path: Optional[str] = None) -> TranslatorConfig:
        """
        Loads TranslatorConfig from a JSON file, then applies environment overrides.
        The file path comes from the argument or EMBED_TRANSLATOR_CONFIG_FILE; with
        neither set only the environment and defaults are used.
        """
        config_path = path or os.getenv(CONFIG_FILE_ENV)
        data: Dict[str, Any] = {}
        if config_path:
            data = ConfigLoader._load_config_data(config_path)
        else:
            logger.info("No translator config file set, using defaults and environment")

        arguments = dict(data)
        for env_name, field in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None and value != "":
                logger.debug(f"Overriding {field} from {env_name}")
                arguments[field] = value

        return TranslatorConfig.from_arguments(arguments)

    @staticmethod
    def model_type_from_hf_config(model_dir: str) -> Optional[ModelType]:
        """Reads the model family from a HuggingFace config.json, if present."""
        config_path = os.path.join(model_dir, "config.json")
        if not os.path.isfile(config_path):
            logger.info(f"No config.json in {model_dir}, model type left unset")
            return None
        data = ConfigLoader._load_config_data(config_path)
        model_type = data.get("model_type")
        if model_type is None:
            return None
        return parse_model_type(model_type)

    @staticmethod
    def _load_config_data(config_path: str) -> Dict[str, Any]:
        if not os.path.exists(config_path):
            logger.error(f"Config file not found: {config_path}")
            raise MissingConfigError(f"Config file not found: {config_path}")
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {config_path}: {e}")
            raise InvalidConfigError(f"Invalid JSON in config file {config_path}: {e}")
        if not isinstance(data, dict):
            raise InvalidConfigError(f"Config file {config_path} must contain a JSON object")
        return data
