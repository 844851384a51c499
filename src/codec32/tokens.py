# -*- test-case-name: codec32.test.test_base32 -*-


class Base32Error(Exception):
    """Base class for every error raised by codec32."""


class NullInput(Base32Error, TypeError):
    """The data argument was None rather than a (possibly empty) byte
    sequence."""


class BadAlphabet(Base32Error, ValueError):
    """The symbol table cannot be used as a Base32 alphabet."""


class UnknownVariant(Base32Error, KeyError):
    """No alphabet is registered under the requested name."""

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ''
