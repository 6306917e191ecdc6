"""
huffman.py  –  bottom-up Huffman code construction

The two lightest nodes are merged until one root is left.  Among equal
weights the node created first is taken first (leaves in table order, then
merged nodes in merge order), so the tree for a given table is always the
same.  The lighter of the pair becomes the left ('0') child.
"""

from __future__ import annotations
import heapq, itertools, logging
from typing import Dict, Hashable, Optional

from .errors import EmptyInput

logger = logging.getLogger(__name__)


class Node:
    """Huffman tree node"""

    def __init__(self, freq, id, char=None, left=None, right=None):
        self.freq, self.char = freq, char
        self.left, self.right = left, right
        self.id = id

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.freq, self.id) < (other.freq, other.id)


def build_huffman_tree(freqs: Dict[Hashable, int]) -> Optional[Node]:
    """Root of the merged tree, or None for a single-symbol table."""
    if not freqs:
        raise EmptyInput("frequency table is empty")
    if len(freqs) == 1:
        return None

    ids = itertools.count()
    heap = [Node(freq, next(ids), char=c) for c, freq in freqs.items()]
    heapq.heapify(heap)

    while len(heap) > 1:
        n1, n2 = heapq.heappop(heap), heapq.heappop(heap)
        heapq.heappush(heap, Node(n1.freq + n2.freq, next(ids), left=n1, right=n2))

    return heap[0]


def gen_codes(node: Node, prefix: str = "", codes=None) -> Dict[Hashable, str]:
    if codes is None:
        codes = {}
    if node.is_leaf:
        codes[node.char] = prefix
    else:
        gen_codes(node.left,  prefix + "0", codes)
        gen_codes(node.right, prefix + "1", codes)
    return codes


def huffman_codes(freqs: Dict[Hashable, int]) -> Dict[Hashable, str]:
    root = build_huffman_tree(freqs)
    if root is None:
        (only,) = freqs
        return {only: "0"}
    codes = gen_codes(root)
    logger.debug("huffman: %d symbols, root weight %d, longest code %d bits",
                 len(codes), root.freq, max(map(len, codes.values())))
    return codes
