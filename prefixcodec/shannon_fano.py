"""
shannon_fano.py  –  top-down Shannon-Fano code construction

Symbols are ordered by descending count (ties keep table order), then the
ordered list is cut, recursively, at the first position where the running
count reaches half of the part's total.  Left part gets '0', right gets '1'.
"""

from __future__ import annotations
import logging
from typing import Dict, Hashable, List, Tuple

from .errors import EmptyInput

logger = logging.getLogger(__name__)


class ShannonFano:
    """Shannon-Fano coding"""

    def __init__(self, freqs: Dict[Hashable, int]):
        if not freqs:
            raise EmptyInput("frequency table is empty")
        self.freqs = freqs
        self.codedict: Dict[Hashable, str] = {}
        self._build_codedict()

    def _build_codedict(self):
        symbols = sorted(self.freqs.items(), key=lambda x: -x[1])
        self._sf_recursive(symbols, "")
        logger.debug("shannon-fano: %d symbols, longest code %d bits",
                     len(self.codedict), max(map(len, self.codedict.values())))

    def _sf_recursive(self, symbols: List[Tuple[Hashable, int]], prefix: str):
        if len(symbols) == 1:
            self.codedict[symbols[0][0]] = prefix or "0"
            return
        idx = split_index([count for _, count in symbols])
        left, right = symbols[:idx + 1], symbols[idx + 1:]
        self._sf_recursive(left,  prefix + "0")
        self._sf_recursive(right, prefix + "1")


def split_index(counts: List[int]) -> int:
    """Index of the last element of the left part."""
    total = sum(counts)
    cum = 0
    for i, count in enumerate(counts):
        cum += count
        # cum >= total / 2, kept in integers
        if 2 * cum >= total:
            return i
    return len(counts) - 1


def shannon_fano_codes(freqs: Dict[Hashable, int]) -> Dict[Hashable, str]:
    return ShannonFano(freqs).codedict
