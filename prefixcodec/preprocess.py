"""
preprocess.py  –  digram mode

Keeps ASCII letters only and pairs them up, left to right, without overlap.
An odd trailing letter is dropped.
"""

from __future__ import annotations
import logging, string
from typing import Iterable, List

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)


def letters_only(text: Iterable[str]) -> str:
    return "".join(ch for ch in text if ch in _LETTERS)


def to_digrams(text: Iterable[str]) -> List[str]:
    letters = letters_only(text)
    if len(letters) % 2:
        logger.debug("dropping unpaired trailing letter %r", letters[-1])
    return [letters[i:i + 2] for i in range(0, len(letters) - 1, 2)]
