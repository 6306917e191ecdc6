from __future__ import annotations
import collections, logging
from typing import Dict, Hashable, Iterable

from .errors import EmptyInput

logger = logging.getLogger(__name__)


def count_frequencies(symbols: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Tally each distinct symbol; keys keep first-occurrence order."""
    freqs = dict(collections.Counter(symbols))
    if not freqs:
        raise EmptyInput()
    logger.debug("counted %d symbols over %d distinct", sum(freqs.values()), len(freqs))
    return freqs
