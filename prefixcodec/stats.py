"""
stats.py  –  entropy, average code length, efficiency

In digram mode each symbol stands for two source characters, so entropy and
average length are halved to read as bits per original character.  The
efficiency ratio is unaffected by the halving.
"""

from __future__ import annotations
import logging, math
from dataclasses import dataclass
from typing import Dict, Hashable

import pandas as pd

from .errors import EmptyInput, UnknownSymbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    symbol_count: int
    alphabet_size: int
    entropy: float          # H, bits/symbol
    avg_length: float       # L, bits/symbol
    efficiency: float       # E = H / L * 100
    digram: bool = False


def probabilities(freqs: Dict[Hashable, int]) -> Dict[Hashable, float]:
    total = sum(freqs.values())
    if total <= 0:
        raise EmptyInput("frequency table is empty")
    return {s: c / total for s, c in freqs.items()}


def entropy(freqs: Dict[Hashable, int]) -> float:
    return -sum(p * math.log2(p) for p in probabilities(freqs).values())


def matching_codes(freqs: Dict[Hashable, int], codes: Dict[Hashable, str]) -> Dict[Hashable, str]:
    """Codes for the table's symbols, in table order; every symbol must have one."""
    out = {}
    for pos, sym in enumerate(freqs):
        try:
            out[sym] = codes[sym]
        except KeyError:
            raise UnknownSymbol(sym, pos) from None
    return out


def avg_length(freqs: Dict[Hashable, int], codes: Dict[Hashable, str]) -> float:
    codes = matching_codes(freqs, codes)
    return sum(p * len(codes[s]) for s, p in probabilities(freqs).items())


def compute_statistics(freqs: Dict[Hashable, int], codes: Dict[Hashable, str],
                       digram: bool = False) -> Statistics:
    h, l = entropy(freqs), avg_length(freqs, codes)
    if digram:
        h, l = h / 2, l / 2
    stats = Statistics(
        symbol_count=sum(freqs.values()),
        alphabet_size=len(freqs),
        entropy=h,
        avg_length=l,
        efficiency=h / l * 100,
        digram=digram,
    )
    logger.debug("H=%.4f L=%.4f E=%.2f%%", stats.entropy, stats.avg_length, stats.efficiency)
    return stats


def codebook_frame(freqs: Dict[Hashable, int], codes: Dict[Hashable, str]) -> pd.DataFrame:
    """One row per symbol, most frequent first."""
    probs = probabilities(freqs)
    codes = matching_codes(freqs, codes)
    rows = []
    for sym, p in sorted(probs.items(), key=lambda x: -x[1]):
        rows.append({
            "Symbol": repr(sym),
            "Count":  freqs[sym],
            "Probability": round(p, 4),
            "Code":   codes[sym],
            "Code Length": len(codes[sym]),
        })
    return pd.DataFrame(rows)
