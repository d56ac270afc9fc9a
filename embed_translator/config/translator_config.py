# =============================================================================
# File: translator_config.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Translator configuration: closed enumerations and the immutable config value."""

from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from embed_translator.exceptions import InvalidConfigError
from embed_translator.logger import get_logger

logger = get_logger("config.translator_config")

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: Type[E], value: Any, option: str) -> E:
    """Parse an enum member by name or value, ignoring case."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise InvalidConfigError(
            f"Invalid value for '{option}': {value!r} (expected a string)"
        )
    key = value.strip()
    for member in enum_cls:
        if key.upper() == member.name or key.lower() == str(member.value).lower():
            return member
    allowed = ", ".join(m.name for m in enum_cls)
    logger.error(f"Unsupported {option} value: {value!r}")
    raise InvalidConfigError(
        f"Unsupported {option} '{value}'. Expected one of: {allowed}"
    )


class PoolingMethod(str, Enum):
    MEAN = "mean"
    CLS = "cls"


class SparseEncodingFormat(str, Enum):
    WORD = "word"
    INT = "int"


class Batchifier(str, Enum):
    """Batching policy requested from the execution layer."""

    STACK = "stack"
    NONE = "none"


class ModelType(str, Enum):
    """Encoder families recognised for feature gating."""

    BERT = "bert"
    ALBERT = "albert"
    ROBERTA = "roberta"
    XLM_ROBERTA = "xlm-roberta"
    DISTILBERT = "distilbert"
    MPNET = "mpnet"
    DEBERTA = "deberta"
    DEBERTA_V2 = "deberta-v2"
    ELECTRA = "electra"
    T5 = "t5"
    OTHER = "other"


# Families whose compiled graphs take token_type_ids as a third input
TYPE_ID_MODEL_TYPES: FrozenSet[ModelType] = frozenset({ModelType.BERT, ModelType.ALBERT})

_TRUE_FLAGS = frozenset({"1", "true", "yes", "on"})
_FALSE_FLAGS = frozenset({"0", "false", "no", "off", ""})


def parse_model_type(value: Any) -> ModelType:
    """Parse a model family; families without a member map to OTHER."""
    if isinstance(value, str) and value.strip():
        key = value.strip()
        for member in ModelType:
            if key.upper() == member.name or key.lower() == member.value:
                return member
        logger.info(f"Model type '{value}' has no dedicated handling, treating as OTHER")
        return ModelType.OTHER
    return parse_enum(ModelType, value, "model type")


# camelCase argument names accepted by from_arguments
_ARGUMENT_ALIASES = {
    "batchifier": "batchifier",
    "poolingMethod": "pooling_method",
    "normalizeResult": "normalize_result",
    "modelType": "model_type",
    "neuron": "neuron",
    "sparseEncodingFormat": "sparse_encoding_format",
}


class TranslatorConfig(BaseModel):
    """Immutable translator settings, validated once at construction."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    batchifier: Batchifier = Field(default=Batchifier.STACK)
    pooling_method: Optional[PoolingMethod] = None
    normalize_result: bool = Field(default=False)
    model_type: Optional[ModelType] = None
    neuron: bool = Field(default=False)
    sparse_encoding_format: SparseEncodingFormat = Field(default=SparseEncodingFormat.WORD)

    @field_validator("batchifier", mode="before")
    @classmethod
    def _parse_batchifier(cls, v: Any) -> Any:
        return Batchifier.STACK if v is None else parse_enum(Batchifier, v, "batchifier")

    @field_validator("pooling_method", mode="before")
    @classmethod
    def _parse_pooling_method(cls, v: Any) -> Any:
        return None if v is None else parse_enum(PoolingMethod, v, "pooling method")

    @field_validator("model_type", mode="before")
    @classmethod
    def _parse_model_type(cls, v: Any) -> Any:
        return None if v is None else parse_model_type(v)

    @field_validator("sparse_encoding_format", mode="before")
    @classmethod
    def _parse_sparse_format(cls, v: Any) -> Any:
        if v is None:
            return SparseEncodingFormat.WORD
        return parse_enum(SparseEncodingFormat, v, "sparse encoding format")

    @field_validator("normalize_result", "neuron", mode="before")
    @classmethod
    def _parse_flag(cls, v: Any) -> Any:
        if v is None:
            return False
        if isinstance(v, str):
            flag = v.strip().lower()
            if flag in _TRUE_FLAGS:
                return True
            if flag in _FALSE_FLAGS:
                return False
            logger.error(f"Invalid boolean value: {v!r}")
            raise InvalidConfigError(
                f"Invalid boolean value '{v}'. Expected one of: "
                f"{', '.join(sorted(_TRUE_FLAGS | _FALSE_FLAGS))}"
            )
        return v

    @property
    def requires_type_ids(self) -> bool:
        """True when the compiled graph expects token_type_ids."""
        return self.neuron and self.model_type in TYPE_ID_MODEL_TYPES

    @classmethod
    def from_arguments(cls, arguments: Optional[Mapping[str, Any]]) -> "TranslatorConfig":
        """Build a config from model arguments (camelCase or snake_case keys).

        Unknown keys are ignored so model-level argument maps can be passed
        through as-is.
        """
        values = {}
        for key, value in (arguments or {}).items():
            field = _ARGUMENT_ALIASES.get(key, key)
            if field in cls.model_fields and value is not None:
                values[field] = value
        return cls(**values)
