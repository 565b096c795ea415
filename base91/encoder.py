"""Base91 encoder.

Input bytes are pushed into a bit queue, least significant bit first.
Whenever more than 13 bits are queued, 13 or 14 of them are taken as one
value and written as two base91 digits, low digit first. A 13-bit value
above 88 cannot be confused with any 14-bit value, so only those values
use the narrow width; everything else borrows a 14th bit.
"""

from .alphabet import STD_ALPHABET, Alphabet


def encoded_len(n: int) -> int:
    """Upper bound on the encoded length of ``n`` input bytes.

    At worst 13 bits become two symbols (16 bits), so this is
    ``ceil(n * 16 / 13)``. The real output may be shorter.
    """
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    return (n * 16 + 12) // 13


def encode_into(dst: bytearray, src: bytes, alphabet: Alphabet = STD_ALPHABET) -> int:
    """Encode ``src`` into the pre-sized buffer ``dst``.

    Returns the number of symbols written. ``dst`` must hold at least
    ``encoded_len(len(src))`` bytes; a smaller buffer raises IndexError.
    """
    if not isinstance(src, (bytes, bytearray, memoryview)):
        raise TypeError(f"src must be bytes-like, not {type(src).__name__}")

    symbols = alphabet.symbols
    queue = 0
    num_bits = 0
    n = 0

    for byte in bytes(src):
        queue |= byte << num_bits
        num_bits += 8
        if num_bits > 13:
            value = queue & 8191
            if value > 88:
                queue >>= 13
                num_bits -= 13
            else:
                value = queue & 16383
                queue >>= 14
                num_bits -= 14
            dst[n] = symbols[value % 91]
            dst[n + 1] = symbols[value // 91]
            n += 2

    # Flush: one symbol, plus a second when the tail does not fit in one digit
    if num_bits > 0:
        dst[n] = symbols[queue % 91]
        n += 1
        if num_bits > 7 or queue > 90:
            dst[n] = symbols[queue // 91]
            n += 1

    return n
