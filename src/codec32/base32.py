# -*- test-case-name: codec32.test.test_base32 -*-

"""
base32.py: Base32 encoding over any 32-symbol alphabet

Every input byte is shifted into a small accumulator and each complete group
of five bits is emitted, most significant first, as one alphabet symbol. One
to four bits left over at the end are shifted up into a final symbol whose
low bits are zero, then '=' is appended until the output length is a multiple
of eight (eight symbols carry exactly five bytes).

Only the encoding direction is provided.
"""

from codec32.alphabets import (
    Alphabet, PAD,
    RFC4648, EXTENDED_HEX, ZBASE32, CROCKFORD, ELECTROLOGICA, GEOHASH,
    WORDSAFE, RECOMMENDED, get_alphabet,
)
from codec32.tokens import NullInput

BLOCK = 8


def encode(alphabet, data, pad=True):
    """Encode the bytes in 'data' with 'alphabet' and return a str.

    'alphabet' is an Alphabet or a 32-character str. 'data' may be any
    bytes-like object or an iterable of ints in range(256). An empty 'data'
    gives an empty string; None raises NullInput.
    """
    if data is None:
        raise NullInput('data must not be None')
    if isinstance(data, (str, int)):
        raise TypeError('expected a bytes-like object, not %s'
                        % type(data).__name__)

    symbols = Alphabet.coerce(alphabet)
    data = bytes(data)

    output = []
    buffer = 0
    n = 0

    for b in data:
        buffer = (buffer << 8) | b
        n = n + 8
        while n >= 5:
            n = n - 5
            output.append(symbols[(buffer >> n) & 0x1F])
        buffer = buffer & 0x1F  # n < 5 here, nothing above bit 4 is pending

    if n > 0:
        output.append(symbols[(buffer << (5 - n)) & 0x1F])

    if pad:
        output.append(PAD * (-len(output) % BLOCK))

    return ''.join(output)


def encoded_length(nbytes, pad=True):
    """How many characters encode() produces for 'nbytes' input bytes."""
    if nbytes < 0:
        raise ValueError('nbytes must not be negative: %d' % nbytes)
    length = (nbytes * 8 + 4) // 5
    if pad:
        length += -length % BLOCK
    return length


def is_base32(text, alphabet=RFC4648, casefold=False):
    """Return True if every character of 'text' is a symbol of 'alphabet',
    ignoring a trailing run of padding. With casefold, letters of either
    case are accepted."""
    symbols = Alphabet.coerce(alphabet)
    body = text.rstrip(PAD)
    if casefold:
        members = set(symbols.symbols.lower() + symbols.symbols.upper())
    else:
        members = symbols
    for c in body:
        if c not in members:
            return False
    return True


def encode_variant(name, data, pad=True):
    return encode(get_alphabet(name), data, pad)


def encode_rfc4648(data, pad=True):
    return encode(RFC4648, data, pad)

def encode_extended_hex(data, pad=True):
    return encode(EXTENDED_HEX, data, pad)

def encode_zbase32(data, pad=True):
    return encode(ZBASE32, data, pad)

def encode_crockford(data, pad=True):
    return encode(CROCKFORD, data, pad)

def encode_electrologica(data, pad=True):
    return encode(ELECTROLOGICA, data, pad)

def encode_geohash(data, pad=True):
    return encode(GEOHASH, data, pad)

def encode_wordsafe(data, pad=True):
    return encode(WORDSAFE, data, pad)

def encode_recommended(data, pad=True):
    return encode(RECOMMENDED, data, pad)
