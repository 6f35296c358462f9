# filename: huffman_errors.py

from loguru import logger


class HuffmanError(Exception):
    """Base class for encoder failures."""


class CodebookMissError(HuffmanError):
    def __init__(self, token):
        super().__init__(f"token {token!r} has no entry in the codebook")
        self.token = token


class OutputSinkError(HuffmanError):
    def __init__(self, target, reason=None):
        message = f"failed to write {target}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.target = target


def sink_name(stream):
    return getattr(stream, "name", type(stream).__name__)


def write_to_sink(stream, text):
    try:
        stream.write(text)
    except (OSError, ValueError) as e:
        logger.error(f"write to {sink_name(stream)} failed: {e}")
        raise OutputSinkError(sink_name(stream), e) from e
