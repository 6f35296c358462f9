# filename: word_scanner.py

import re

from huffman_errors import write_to_sink

# ASCII letters, with single apostrophes allowed between letters ("camp's").
WORD_PATTERN = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)*")


def tokenize(text):
    return [match.group(0).lower() for match in WORD_PATTERN.finditer(text)]


def tokenize_file(path):
    # Anything outside ASCII letters is a separator, so undecodable bytes are harmless.
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return tokenize(f.read())


def write_tokens(tokens, stream):
    if tokens:
        write_to_sink(stream, "".join(f"{token}\n" for token in tokens))
