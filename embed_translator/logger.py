# =============================================================================
# File: logger.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
import os

LOGGER_NAMESPACE = "embed_translator"


def _configure_root(log_file: str) -> logging.Logger:
    log_dir = os.getenv("EMBED_TRANSLATOR_LOG_DIR", "logs")
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    log_path = os.path.join(log_dir, log_file)

    root = logging.getLogger(LOGGER_NAMESPACE)
    if root.level == logging.NOTSET:
        root.setLevel(logging.INFO)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Console handler
    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    ):
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        root.addHandler(ch)

    # File handler
    if not any(
        isinstance(h, logging.FileHandler)
        and h.baseFilename == os.path.abspath(log_path)
        for h in root.handlers
    ):
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    return root


def get_logger(name: str = LOGGER_NAMESPACE, log_file: str = "embed_translator.log") -> logging.Logger:
    """Logger under the embed_translator namespace; handlers live on the namespace root."""
    root = _configure_root(log_file)
    if name == LOGGER_NAMESPACE:
        return root
    if name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
