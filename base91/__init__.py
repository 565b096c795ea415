"""Base91 binary-to-text encoding."""

from .alphabet import (
    ALPHABET_SIZE,
    STD_ALPHABET,
    STD_ALPHABET_SYMBOLS,
    Alphabet,
    InvalidAlphabetError,
)
from .codec import (
    STD_ENCODING,
    Encoding,
    decode,
    decode_string,
    encode,
    encode_string,
)
from .decoder import CorruptInputError, decode_into, decoded_len
from .encoder import encode_into, encoded_len

__version__ = "0.1.0"

__all__ = [
    "ALPHABET_SIZE",
    "STD_ALPHABET",
    "STD_ALPHABET_SYMBOLS",
    "STD_ENCODING",
    "Alphabet",
    "CorruptInputError",
    "Encoding",
    "InvalidAlphabetError",
    "decode",
    "decode_into",
    "decode_string",
    "decoded_len",
    "encode",
    "encode_into",
    "encode_string",
    "encoded_len",
]
