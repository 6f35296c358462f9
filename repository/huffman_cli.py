# filename: huffman_cli.py

import argparse
import sys
from pathlib import Path

from loguru import logger

import huffman_config
from frequency_table import FrequencyTable
from huffman_errors import HuffmanError
from huffman_service import HuffmanService
from word_scanner import tokenize_file, write_tokens


def configure_logging(level):
    logger.remove()
    logger.add(sys.stderr, level=level)


def output_paths(input_path, output_dir):
    base = Path(input_path).stem
    out = Path(output_dir)
    return {
        "tokens": out / f"{base}.tokens",
        "freq": out / f"{base}.freq",
        "header": out / f"{base}.hdr",
        "code": out / f"{base}.code",
    }


def run(input_path, output_dir, wrap_width=None):
    service = HuffmanService(wrap_width)
    tokens = tokenize_file(input_path)
    paths = output_paths(input_path, output_dir)
    Path(output_dir).mkdir(parents=True, exist_ok=True)

    with open(paths["tokens"], "w") as f:
        write_tokens(tokens, f)
    with open(paths["freq"], "w") as f:
        FrequencyTable(tokens).write_frequencies(f)
    with open(paths["header"], "w") as header, open(paths["code"], "w") as bits:
        result = service.compress_tokens(tokens, header, bits)
    return result, paths


def main(argv=None):
    parser = argparse.ArgumentParser(description="Word-level Huffman encoder")
    parser.add_argument("input", help="Text file to encode")
    parser.add_argument(
        "--output-dir",
        default=huffman_config.OUTPUT_DIR,
        help=f"Directory for the .tokens/.freq/.hdr/.code files (default: {huffman_config.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--wrap",
        type=int,
        default=None,
        help=f"Bitstream line width (default: {huffman_config.WRAP_WIDTH})",
    )
    parser.add_argument("--log-level", default=huffman_config.LOG_LEVEL)
    args = parser.parse_args(argv)

    level = args.log_level.upper()
    if level not in huffman_config.LOG_LEVELS:
        logger.error(f"unknown log level {args.log_level!r}, expected one of {', '.join(huffman_config.LOG_LEVELS)}")
        return 2
    configure_logging(level)

    if not Path(args.input).is_file():
        logger.error(f"input file not found: {args.input}")
        return 1
    try:
        result, paths = run(args.input, args.output_dir, args.wrap)
    except ValueError as e:
        logger.error(str(e))
        return 2
    except HuffmanError as e:
        logger.error(f"encoding failed: {e}")
        return 2
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    print(f"Tokens:         {result.token_count}")
    print(f"Distinct words: {result.distinct_words}")
    print(f"Bits:           {result.bit_count}")
    print(f"Tree height:    {result.tree_height}")
    if result.min_frequency is not None:
        print(f"Min frequency:  {result.min_frequency}")
        print(f"Max frequency:  {result.max_frequency}")
    print(f"Header:         {paths['header']}")
    print(f"Bitstream:      {paths['code']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
