"""Base91 decoder.

Symbols are read in pairs. Each pair is one value (low digit first) that
carried 13 or 14 bits, decided by the same rule the encoder used. A lone
trailing symbol holds the last partial byte.

Decoding stops at the first symbol outside the alphabet. Base91 text is not
self-synchronizing, so nothing after a bad symbol can be trusted.
"""

from typing import Iterable, Optional, Tuple

from .alphabet import STD_ALPHABET, Alphabet


class CorruptInputError(ValueError):
    """A symbol outside the alphabet was found at ``position``."""

    def __init__(self, position: int):
        super().__init__(f"illegal base91 data at input byte {position}")
        self.position = position

    def __reduce__(self):
        return type(self), (self.position,)


def decoded_len(n: int) -> int:
    """Upper bound on the decoded length of ``n`` symbols.

    Decoded output is never longer than its encoding, so the bound is ``n``
    itself.
    """
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    return n


def decode_into(dst: bytearray, src: Iterable[int],
                alphabet: Alphabet = STD_ALPHABET) -> Tuple[int, Optional[CorruptInputError]]:
    """Decode the symbol codes in ``src`` into the pre-sized buffer ``dst``.

    Returns ``(n, error)`` where ``n`` is the number of bytes written and
    ``error`` is None or a CorruptInputError for the first bad symbol. The
    bytes written before a bad symbol stay in ``dst[:n]``.

    ``dst`` must hold at least ``decoded_len(len(src))`` bytes; a smaller
    buffer raises IndexError.
    """
    if isinstance(src, str):
        raise TypeError("src must be symbol bytes or codes, not str; use Encoding.decode_from_text")

    lookup = alphabet.lookup
    queue = 0
    num_bits = 0
    pending = None
    n = 0

    for i, code in enumerate(src):
        digit = lookup(code)
        if digit is None:
            return n, CorruptInputError(i)

        if pending is None:
            pending = digit
            continue

        value = pending + digit * 91
        queue |= value << num_bits
        num_bits += 13 if (value & 8191) > 88 else 14

        while num_bits > 7:
            dst[n] = queue & 0xFF
            n += 1
            queue >>= 8
            num_bits -= 8

        pending = None

    if pending is not None:
        dst[n] = (queue | pending << num_bits) & 0xFF
        n += 1

    return n, None
