# -*- test-case-name: codec32.test.test_alphabets -*-

import types

from twisted.logger import Logger

from codec32.tokens import BadAlphabet, UnknownVariant

ALPHABET_SIZE = 32
PAD = '='


class Alphabet:
    """An ordered table of 32 symbols, indexed by 5-bit values.

    The table is checked once, when the Alphabet is built: it must be a str
    of exactly 32 printable characters, none of which may be whitespace or
    the padding character. A repeated symbol still encodes, but two values
    then share one character and cannot be told apart when read back, so it
    is logged and reported by 'unique' rather than refused.

    Instances are immutable and safe to share between threads.
    """

    log = Logger()

    __slots__ = ('name', 'symbols', 'unique', '_members')

    def __init__(self, symbols, name=None):
        reason = self._check(symbols)
        if reason is not None:
            self.log.warn('rejected base32 alphabet {name}: {reason}',
                          name=name, reason=reason)
            raise BadAlphabet(reason)

        members = frozenset(symbols)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'symbols', symbols)
        object.__setattr__(self, 'unique', len(members) == ALPHABET_SIZE)
        object.__setattr__(self, '_members', members)

        if not self.unique:
            repeated = sorted(c for c in members if symbols.count(c) > 1)
            self.log.warn('base32 alphabet {name} repeats {repeated}',
                          name=name, repeated=''.join(repeated))
        self.log.debug('base32 alphabet {name} ready', name=name)

    @staticmethod
    def _check(symbols):
        if not isinstance(symbols, str):
            return 'symbols must be a str, not %s' % type(symbols).__name__
        if len(symbols) != ALPHABET_SIZE:
            return 'expected %d symbols, got %d' % (ALPHABET_SIZE, len(symbols))
        for c in symbols:
            if c == PAD:
                return 'the padding character %r cannot be a symbol' % PAD
            if not c.isprintable() or c.isspace():
                return 'unprintable symbol %r' % c
        return None

    @classmethod
    def coerce(cls, alphabet):
        if isinstance(alphabet, cls):
            return alphabet
        return cls(alphabet)

    def __setattr__(self, name, value):
        raise AttributeError('Alphabet is immutable')

    def __len__(self):
        return ALPHABET_SIZE

    def __getitem__(self, index):
        return self.symbols[index]

    def __iter__(self):
        return iter(self.symbols)

    def __contains__(self, symbol):
        return symbol in self._members

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self):
        return hash(self.symbols)

    def __str__(self):
        return self.symbols

    def __repr__(self):
        if self.name is None:
            return 'Alphabet(%r)' % self.symbols
        return 'Alphabet(%r, name=%r)' % (self.symbols, self.name)


# RFC 4648 section 6
RFC4648       = Alphabet('ABCDEFGHIJKLMNOPQRSTUVWXYZ234567', 'rfc4648')
# RFC 4648 section 7, keeps the sort order of the encoded bytes
EXTENDED_HEX  = Alphabet('0123456789ABCDEFGHIJKLMNOPQRSTUV', 'extended-hex')
# '8' sits at both index 7 and index 31 of this table
ZBASE32       = Alphabet('ybndrfg8ejkmcpqxot1uwisza345h768', 'zbase32')
# no i, l, o or u
CROCKFORD     = Alphabet('0123456789abcdefghjkmnpqrstvwxyz', 'crockford')
ELECTROLOGICA = Alphabet('ABCDEFGHIJKLMNOPQRSTUVWXYZ234567', 'electrologica')
GEOHASH       = Alphabet('0123456789bcdefghjkmnpqrstuvwxyz', 'geohash')
WORDSAFE      = Alphabet('abcdefghijklmnopqrstuvwxyz234567', 'wordsafe')

RECOMMENDED = RFC4648

ALPHABETS = types.MappingProxyType({
    'rfc4648'      : RFC4648,
    'extended-hex' : EXTENDED_HEX,
    'zbase32'      : ZBASE32,
    'crockford'    : CROCKFORD,
    'electrologica': ELECTROLOGICA,
    'geohash'      : GEOHASH,
    'wordsafe'     : WORDSAFE,
    'recommended'  : RECOMMENDED,
})


def get_alphabet(name):
    key = name.lower().replace('_', '-') if isinstance(name, str) else name
    try:
        return ALPHABETS[key]
    except (KeyError, TypeError):
        raise UnknownVariant('unknown base32 variant %r, expected one of %s'
                             % (name, ', '.join(get_alphabet_names()))) from None


def get_alphabet_names():
    return sorted(ALPHABETS.keys())
