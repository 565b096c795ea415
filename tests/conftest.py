import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from base91 import STD_ALPHABET_SYMBOLS, Alphabet


@pytest.fixture
def reversed_alphabet():
    """Standard symbols in reverse order: every digit maps to a new symbol."""
    return Alphabet(STD_ALPHABET_SYMBOLS[::-1])


@pytest.fixture
def high_alphabet():
    """Alphabet made only of latin-1 bytes 0xA1-0xFB."""
    return Alphabet(bytes(range(0xA1, 0xA1 + 91)))
