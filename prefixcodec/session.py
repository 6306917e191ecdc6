"""
session.py  –  one encode run and everything needed to undo it

encode_text() hands back an EncodeResult; the caller keeps it and passes it
to decode_bits() or format_report() later.  Nothing is remembered here
between calls.

Dependencies:  json, logging, pandas (through stats.codebook_frame)
"""

from __future__ import annotations
import json, logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from . import codec
from .config import CodecConfig
from .errors import InsufficientInput, InvalidCodeTable
from .frequency import count_frequencies
from .huffman import huffman_codes
from .preprocess import letters_only, to_digrams
from .shannon_fano import shannon_fano_codes
from .stats import Statistics, codebook_frame, compute_statistics

logger = logging.getLogger(__name__)

BUILDERS = {"sf": shannon_fano_codes, "hf": huffman_codes}


@dataclass
class EncodeResult:
    mode: str
    symbols: List[str]
    frequencies: Dict[str, int]
    code_table: Dict[str, str]
    bits: str
    digram: bool = False

    def statistics(self) -> Statistics:
        return compute_statistics(self.frequencies, self.code_table, self.digram)


# ----------------------------------------------------------------------
# encode / decode
# ----------------------------------------------------------------------

def check_length(text: str, minimum: int):
    if len(text) < minimum:
        logger.warning("rejecting input of %d symbols (minimum %d)", len(text), minimum)
        raise InsufficientInput(len(text), minimum)


def encode_text(text: str, config: Optional[CodecConfig] = None) -> EncodeResult:
    config = config or CodecConfig()
    check_length(text, config.min_symbols)

    symbols = to_digrams(text) if config.digram else list(text)
    freqs = count_frequencies(symbols)
    codes = BUILDERS[config.builder](freqs)
    bits = codec.encode(symbols, codes)

    logger.info("%s: %d symbols, %d distinct, %d bits", config.mode, len(symbols), len(freqs), len(bits))
    return EncodeResult(config.mode, symbols, freqs, codes, bits, config.digram)


def decode_bits(bits: str, source: Union[EncodeResult, Dict[str, str]]) -> str:
    """Decode `bits` (stray characters ignored) with a result or a bare code table."""
    codes = source.code_table if isinstance(source, EncodeResult) else source
    bits = codec.clean_bits(bits)
    text = codec.decode_text(bits, codes)
    logger.info("decoded %d bits into %d characters", len(bits), len(text))
    return text


# ----------------------------------------------------------------------
# codebook files and report
# ----------------------------------------------------------------------

def dump_codebook(codes: Dict[str, str]) -> str:
    return json.dumps(codes, indent=2, ensure_ascii=False)


def load_codebook(text: str) -> Dict[str, str]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidCodeTable(None, None, f"code table is not valid JSON: {e.msg} (line {e.lineno})") from None
    if not isinstance(data, dict):
        raise InvalidCodeTable(None, data, "code table must be a JSON object of symbol: code")
    for sym, code in data.items():
        if not isinstance(code, str):
            raise InvalidCodeTable(sym, code)
    return data


def check_codebook_mode(codes: Dict[str, str], mode: str):
    """In ext2 mode every symbol of the table must be a letter pair."""
    if mode != "ext2":
        return
    for sym, code in codes.items():
        if len(sym) != 2 or letters_only(sym) != sym:
            raise InvalidCodeTable(sym, code, f"symbol {sym!r} is not a letter pair, table was not built in ext2 mode")


def format_report(result: EncodeResult) -> str:
    st = result.statistics()
    unit = "bits/character" if st.digram else "bits/symbol"
    lines = [
        f"Mode: {result.mode}",
        f"Symbols: {st.symbol_count}",
        f"Distinct symbols: {st.alphabet_size}",
        f"Entropy (H): {st.entropy:.4f} {unit}",
        f"Average length (L): {st.avg_length:.4f} {unit}",
        f"Efficiency (E): {st.efficiency:.2f}%",
        "",
        "Codebook:",
        codebook_frame(result.frequencies, result.code_table).to_string(index=False),
    ]
    return "\n".join(lines)
