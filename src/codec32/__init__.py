"""
codec32: Base32 encoding with the RFC 4648, Extended Hex, Z-Base-32,
Crockford, Electrologica, GeoHash and Word-safe alphabets.
"""

__version__ = '0.1.0'

from codec32.tokens import Base32Error, NullInput, BadAlphabet, UnknownVariant
from codec32.alphabets import (
    Alphabet, ALPHABETS, get_alphabet, get_alphabet_names,
    RFC4648, EXTENDED_HEX, ZBASE32, CROCKFORD, ELECTROLOGICA, GEOHASH,
    WORDSAFE, RECOMMENDED,
)
from codec32.base32 import (
    encode, encoded_length, is_base32, encode_variant,
    encode_rfc4648, encode_extended_hex, encode_zbase32, encode_crockford,
    encode_electrologica, encode_geohash, encode_wordsafe, encode_recommended,
)
