"""Base91 alphabet tables.

An alphabet is 91 distinct single-byte symbols. Symbol ``i`` stands for the
base91 digit ``i``; every other byte value is outside the alphabet.

The standard alphabet is the printable ASCII range without
space (0x20), apostrophe (0x27), hyphen (0x2d) and backslash (0x5c).
"""

from typing import Optional, Tuple, Union

ALPHABET_SIZE = 91

STD_ALPHABET_SYMBOLS = (
    b'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    b'abcdefghijklmnopqrstuvwxyz'
    b'0123456789'
    b'!#$%&()*+,./:;<=>?@[]^_`{|}~"'
)

# Bytes that would break line-oriented transports
FORBIDDEN_SYMBOLS = frozenset(b'\r\n')


class InvalidAlphabetError(ValueError):
    """Raised when an alphabet definition cannot be turned into a table."""


class Alphabet:
    """Immutable bidirectional mapping between digits 0-90 and symbol bytes.

    Args:
        definition: 91 symbols as bytes, or as a str with one latin-1
            character per symbol.

    Raises:
        InvalidAlphabetError: wrong length, CR/LF present, duplicate
            symbols, or characters that do not fit in one byte.
    """

    __slots__ = ('_symbols', '_values')

    def __init__(self, definition: Union[bytes, bytearray, str]):
        if isinstance(definition, str):
            try:
                definition = definition.encode('latin-1')
            except UnicodeEncodeError as e:
                raise InvalidAlphabetError(
                    f"alphabet symbols must be single bytes: {e}") from None
        elif isinstance(definition, (bytes, bytearray, memoryview)):
            definition = bytes(definition)
        else:
            raise TypeError(
                f"alphabet definition must be bytes or str, not {type(definition).__name__}")

        if len(definition) != ALPHABET_SIZE:
            raise InvalidAlphabetError(
                f"alphabet is not {ALPHABET_SIZE} bytes long (got {len(definition)})")

        values = [None] * 256
        for i, symbol in enumerate(definition):
            if symbol in FORBIDDEN_SYMBOLS:
                raise InvalidAlphabetError(
                    f"alphabet contains newline character at index {i}")
            if values[symbol] is not None:
                raise InvalidAlphabetError(
                    f"alphabet symbol {chr(symbol)!r} at index {i} duplicates index {values[symbol]}")
            values[symbol] = i

        self._symbols = definition
        self._values: Tuple[Optional[int], ...] = tuple(values)

    def __setattr__(self, name, value):
        if hasattr(self, '_values'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    @property
    def symbols(self) -> bytes:
        """The 91 symbols, indexed by digit value."""
        return self._symbols

    @property
    def value_of(self) -> Tuple[Optional[int], ...]:
        """256-entry table: digit value per byte, ``None`` when absent."""
        return self._values

    def lookup(self, code: int) -> Optional[int]:
        """Return the digit for a symbol code, or None if it is not in the alphabet."""
        if 0 <= code < 256:
            return self._values[code]
        return None

    def __len__(self):
        return ALPHABET_SIZE

    def __contains__(self, code):
        if isinstance(code, str):
            code = ord(code) if len(code) == 1 else -1
        return self.lookup(code) is not None

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self):
        return hash(self._symbols)

    def __repr__(self):
        return f"Alphabet({self._symbols.decode('latin-1')!r})"


STD_ALPHABET = Alphabet(STD_ALPHABET_SYMBOLS)
