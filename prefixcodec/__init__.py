"""
prefixcodec  –  Shannon-Fano & Huffman prefix codes for text

Dependencies:  pandas (codebook table), PyYAML (configuration)
"""

__version__ = "0.1.0"

from .errors import (
    CodingError, EmptyInput, InsufficientInput, UnknownSymbol,
    AmbiguousCode, InvalidCodeTable, UndecodableTail, ConfigError,
)
from .frequency import count_frequencies
from .preprocess import to_digrams
from .shannon_fano import shannon_fano_codes
from .huffman import huffman_codes
from .codec import encode, decode, decode_text, clean_bits
from .stats import Statistics, compute_statistics, codebook_frame
from .config import CodecConfig, ConfigLoader
from .session import EncodeResult, encode_text, decode_bits, format_report, dump_codebook, load_codebook
