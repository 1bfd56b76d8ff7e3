# -*- test-case-name: b32stream.test.test_codec -*-

"""
codec.py: whole-buffer Base32 encoding and decoding bound to a variant

An encoder or decoder is configured once, at construction, and never changes
afterwards: two instances built with the same options always produce the
same output for the same input. Text input is UTF-8 encoded before it is
encoded, and decoded bytes are UTF-8 decoded by the *ToText methods.
"""

from . import base32, variants


def _asBytes(item):
    if isinstance(item, str):
        return item.encode('utf-8')
    return bytes(item)


class Base32Encoder:
    defaultVariant = variants.DEFAULT_VARIANT
    defaultPadding = None  # None: use the variant's own setting

    def __init__(self, variant=None, padding=None):
        if variant is None:
            variant = self.defaultVariant
        if padding is None:
            padding = self.defaultPadding

        spec = variants.lookup(variant)

        self._variant  = variant
        self._alphabet = spec.alphabet
        self._padding  = spec.padding if padding is None else bool(padding)

    @property
    def variant(self):
        return self._variant

    @property
    def padding(self):
        return self._padding

    def encodeToBytes(self, item):
        return base32.encode(_asBytes(item), self._alphabet, self._padding)

    def encodeToText(self, item):
        return self.encodeToBytes(item).decode('ascii')

    def __repr__(self):
        return '<{} variant={!r} padding={!r}>'.format(type(self).__name__, self._variant, self._padding)


class Base32Decoder:
    defaultVariant = variants.DEFAULT_VARIANT

    def __init__(self, variant=None):
        if variant is None:
            variant = self.defaultVariant

        spec = variants.lookup(variant)

        self._variant  = variant
        self._alphabet = spec.alphabet

    @property
    def variant(self):
        return self._variant

    def decodeToBytes(self, item):
        if not isinstance(item, str):
            item = bytes(item)
        return base32.decode(item, self._alphabet, self._variant)

    def decodeToText(self, item):
        return self.decodeToBytes(item).decode('utf-8')

    def isValid(self, item):
        """True if decodeToBytes would accept every symbol of `item`
        (trailing bits are not checked)."""
        return base32.isBase32(item, self._alphabet)

    def __repr__(self):
        return '<{} variant={!r}>'.format(type(self).__name__, self._variant)
