"""
codec.py  –  turning symbols into a '0'/'1' string and back

The bit string is plain text, one character per bit.  Decoding is greedy:
bits are collected until they spell a known code, which is only sound
because the code tables built here are prefix-free.
"""

from __future__ import annotations
import logging, re
from typing import Dict, Hashable, Iterable, List

from .errors import AmbiguousCode, InvalidCodeTable, UndecodableTail, UnknownSymbol

logger = logging.getLogger(__name__)

_NON_BITS = re.compile(r"[^01]")
_BITS = re.compile(r"[01]+")


def clean_bits(text: str) -> str:
    """Drop everything that is not '0' or '1' (whitespace, line breaks...)."""
    return _NON_BITS.sub("", text)


def encode(symbols: Iterable[Hashable], codes: Dict[Hashable, str]) -> str:
    out = []
    for pos, sym in enumerate(symbols):
        try:
            out.append(codes[sym])
        except KeyError:
            raise UnknownSymbol(sym, pos) from None
    bits = "".join(out)
    logger.debug("encoded %d symbols into %d bits", len(out), len(bits))
    return bits


def inverse_table(codes: Dict[Hashable, str]) -> Dict[str, Hashable]:
    rev: Dict[str, Hashable] = {}
    for sym, code in codes.items():
        if not isinstance(code, str) or not _BITS.fullmatch(code):
            raise InvalidCodeTable(sym, code)
        if code in rev:
            raise AmbiguousCode(code, rev[code], sym)
        rev[code] = sym
    return rev


def is_prefix_free(codes: Dict[Hashable, str]) -> bool:
    # after sorting, a code that prefixes another sorts right before some code it prefixes
    ordered = sorted(codes.values())
    return not any(b.startswith(a) for a, b in zip(ordered, ordered[1:]))


def decode(bits: str, codes: Dict[Hashable, str]) -> List[Hashable]:
    rev = inverse_table(codes)
    if len(rev) > 1 and not is_prefix_free(codes):
        logger.warning("code table is not prefix-free, greedy decoding may misread the input")
    longest = max(map(len, rev), default=0)

    out, buf, start = [], "", 0
    for pos, b in enumerate(bits):
        buf += b
        if buf in rev:
            out.append(rev[buf])
            buf, start = "", pos + 1
        elif len(buf) >= longest:
            raise UndecodableTail(bits[start:start + longest], start)
    if buf:
        raise UndecodableTail(buf, start)

    logger.debug("decoded %d bits into %d symbols", len(bits), len(out))
    return out


def decode_text(bits: str, codes: Dict[Hashable, str]) -> str:
    return "".join(decode(bits, codes))
