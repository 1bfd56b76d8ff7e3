# -*- test-case-name: b32stream.test.test_base32 -*-


class Base32Error(Exception):
    """Base class for everything this package raises."""


class InvalidVariant(Base32Error, ValueError):
    """The requested variant name is not in the variant table."""

    def __init__(self, name, valid):
        self.name  = name
        self.valid = sorted(valid)
        super().__init__('`{}` is not a valid Base32 variant type! Only accept these values: {}'
            .format(name, ', '.join(self.valid)))


class InvalidCharacter(Base32Error, ValueError):
    """Encoded data holds a symbol outside the alphabet, or its final
    partial group carries non-zero bits."""

    def __init__(self, variant=None):
        self.variant = variant
        super().__init__('Encoded data does not exclusively consist of Base32 ({}) characters!'
            .format(variant or 'custom'))


class StreamClosed(Base32Error):
    """Input arrived after the stream was finished or terminated."""
