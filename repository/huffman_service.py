# filename: huffman_service.py

import io
from dataclasses import dataclass
from typing import Optional

from loguru import logger

import huffman_config
from frequency_table import FrequencyTable
from huffman_core import HuffmanLogic, walk_leaves
from huffman_errors import CodebookMissError, write_to_sink
from word_scanner import tokenize


@dataclass
class EncodeResult:
    distinct_words: int
    token_count: int
    bit_count: int
    tree_height: int
    min_frequency: Optional[int]
    max_frequency: Optional[int]


class HuffmanService:
    def __init__(self, wrap_width=None):
        if wrap_width is None:
            wrap_width = huffman_config.WRAP_WIDTH
        if isinstance(wrap_width, bool) or not isinstance(wrap_width, int) or wrap_width <= 0:
            raise ValueError(f"wrap width must be a positive integer, got {wrap_width!r}")
        self.wrap_width = wrap_width
        self.logic = HuffmanLogic()

    def build(self, pairs):
        return self.logic.build_tree(pairs)

    def write_header(self, tree, stream):
        """One "word code" line per leaf, in preorder. An empty tree writes nothing."""
        lines = [f"{leaf.word} {code}\n" for leaf, code in walk_leaves(tree.root)]
        if lines:
            write_to_sink(stream, "".join(lines))
        return len(lines)

    def encode(self, tokens, tree, stream):
        """
        Write the codes of ``tokens`` as '0'/'1' text, breaking the line after
        every ``wrap_width`` characters. Non-empty output always ends with
        exactly one newline. Returns the number of bits written.
        """
        codes = self.logic.generate_codes(tree)
        wrap = self.wrap_width
        out = []
        column = 0
        bit_count = 0
        for token in tokens:
            try:
                code = codes[token]
            except KeyError:
                raise CodebookMissError(token) from None
            for bit in code:
                out.append(bit)
                column += 1
                if column == wrap:
                    out.append("\n")
                    column = 0
            bit_count += len(code)
        if column != 0:
            out.append("\n")
        if out:
            write_to_sink(stream, "".join(out))
        return bit_count

    def compress_tokens(self, tokens, header_stream, bits_stream):
        tokens = list(tokens)
        table = FrequencyTable(tokens)
        tree = self.build(table.sorted_pairs())
        self.write_header(tree, header_stream)
        bit_count = self.encode(tokens, tree, bits_stream)

        result = EncodeResult(
            distinct_words=table.size,
            token_count=len(tokens),
            bit_count=bit_count,
            tree_height=tree.height(),
            min_frequency=table.min_frequency(),
            max_frequency=table.max_frequency(),
        )
        logger.info(
            f"encoded {result.token_count} tokens ({result.distinct_words} distinct) "
            f"into {result.bit_count} bits, tree height {result.tree_height}"
        )
        return result

    def compress_text(self, text):
        header, bits = io.StringIO(), io.StringIO()
        result = self.compress_tokens(tokenize(text), header, bits)
        return header.getvalue(), bits.getvalue(), result
