# filename: huffman_config.py
"""
Runtime settings for the encoder, read from the environment (and a local
.env file when present).
"""
import os

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

DEFAULT_WRAP_WIDTH = 80
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT_DIR = "input_output"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _int_from_env(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} must be positive, using {default}")
        return default
    return value


def _level_from_env(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"{name}={raw!r} is not a log level, using {default}")
        return default
    return level


WRAP_WIDTH = _int_from_env("HUFFMAN_WRAP_WIDTH", DEFAULT_WRAP_WIDTH)
LOG_LEVEL = _level_from_env("HUFFMAN_LOG_LEVEL", DEFAULT_LOG_LEVEL)
OUTPUT_DIR = os.getenv("HUFFMAN_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
