# =============================================================================
# File: exceptions.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Custom exceptions for the embedding translator."""
from typing import Optional


class TranslatorBaseException(Exception):
    """Base exception for all translator errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        super().__init__(self.message)


class ModelException(TranslatorBaseException):
    """Exceptions related to model loading and inference."""

    pass


class ModelLoadError(ModelException):
    """Failed to load model or create session."""

    pass


class TokenizerError(ModelException):
    """Tokenizer-related errors."""

    pass


class ConfigurationException(TranslatorBaseException):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationException):
    """Invalid configuration parameters."""

    pass


class MissingConfigError(ConfigurationException):
    """Required configuration missing."""

    pass


class ValidationException(TranslatorBaseException):
    """Input validation errors."""

    pass


class InvalidInputError(ValidationException):
    """Invalid input parameters."""

    pass
