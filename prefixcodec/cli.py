#!/usr/bin/env python3
"""
Command-line front end.

Usage:
    prefixcodec encode input.txt --mode sf --bits-out encoded_bits.txt --codebook-out codebook.json --report
    prefixcodec decode encoded_bits.txt --codebook codebook.json --mode hf --output decoded.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import CodecConfig, ConfigLoader, MODES
from .errors import CodingError
from .logging_utils import setup_logging
from .session import (
    check_codebook_mode, decode_bits, dump_codebook, encode_text, format_report, load_codebook,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prefixcodec", description="Shannon-Fano / Huffman text coding")
    parser.add_argument("--config", type=str, help="Path to YAML configuration file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode a text file")
    enc.add_argument("input", type=str, help="Text file to encode")
    enc.add_argument("--mode", type=str, choices=MODES)
    enc.add_argument("--min-symbols", type=int, help="Minimum input length, 0 to disable")
    enc.add_argument("--bits-out", type=str, help="Write the bit string here instead of stdout")
    enc.add_argument("--codebook-out", type=str, help="Write the code table as JSON")
    enc.add_argument("--report", action="store_true", help="Print the statistics report")

    dec = sub.add_parser("decode", help="Decode a bit string file")
    dec.add_argument("bits", type=str, help="File holding '0'/'1' characters")
    dec.add_argument("--codebook", type=str, required=True, help="Code table written by encode")
    dec.add_argument("--mode", type=str, choices=MODES, help="Mode the code table was built in; ext2 checks for letter-pair symbols")
    dec.add_argument("--output", type=str, help="Write decoded text here instead of stdout")
    return parser


def load_config(args) -> CodecConfig:
    config = ConfigLoader.load_codec_config(args.config) if args.config else CodecConfig()
    overrides = {
        "mode": getattr(args, "mode", None),
        "min_symbols": getattr(args, "min_symbols", None),
        "log_level": args.log_level,
    }
    fields = {**config.__dict__, **{k: v for k, v in overrides.items() if v is not None}}
    return CodecConfig(**fields)


def run_encode(args, config: CodecConfig):
    text = Path(args.input).read_text(encoding="utf-8")
    result = encode_text(text, config)
    if args.bits_out:
        Path(args.bits_out).write_text(result.bits, encoding="utf-8")
        logger.info(f"Bit string written to {args.bits_out}")
    else:
        print(result.bits)
    if args.codebook_out:
        Path(args.codebook_out).write_text(dump_codebook(result.code_table), encoding="utf-8")
        logger.info(f"Code table written to {args.codebook_out}")
    if args.report:
        print(format_report(result))


def run_decode(args, config: CodecConfig):
    codes = load_codebook(Path(args.codebook).read_text(encoding="utf-8"))
    if args.mode:
        check_codebook_mode(codes, config.mode)
    text = decode_bits(Path(args.bits).read_text(encoding="utf-8"), codes)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info(f"Decoded text written to {args.output}")
    else:
        print(text)


def fail(e: Exception) -> int:
    if isinstance(e, OSError):
        message = f"{e.filename}: {e.strerror}" if e.filename else str(e)
    elif isinstance(e, UnicodeDecodeError):
        message = f"input is not UTF-8 text (byte {e.start})"
    else:
        message = str(e)
    print(f"error: {message}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args)
    except (CodingError, OSError, UnicodeDecodeError) as e:
        return fail(e)
    setup_logging(level=config.log_level, log_dir=config.log_dir)

    try:
        if args.command == "encode":
            run_encode(args, config)
        else:
            run_decode(args, config)
    except (CodingError, OSError, UnicodeDecodeError) as e:
        return fail(e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
