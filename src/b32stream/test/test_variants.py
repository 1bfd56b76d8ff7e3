
from twisted.trial import unittest

from b32stream import variants
from b32stream.tokens import InvalidVariant


ALL_NAMES = ['crockford', 'geohash', 'hex', 'hexadecimal', 'rfc3548',
             'rfc4648-6', 'rfc4648-7', 'standard', 'wordsafe', 'z']


class Table(unittest.TestCase):
    def test_names(self):
        self.assertEqual(variants.getVariantNames(), ALL_NAMES)

    def test_alphabets(self):
        for name in ALL_NAMES:
            alphabet = variants.lookup(name).alphabet
            self.assertEqual(len(alphabet), 32)
            self.assertEqual(len(set(alphabet)), 32)

    def test_specifications(self):
        self.assertEqual(variants.lookup('standard'),
                         ('ABCDEFGHIJKLMNOPQRSTUVWXYZ234567', True))
        self.assertEqual(variants.lookup('hex'),
                         ('0123456789ABCDEFGHIJKLMNOPQRSTUV', True))
        self.assertEqual(variants.lookup('crockford'),
                         ('0123456789ABCDEFGHJKMNPQRSTVWXYZ', False))
        self.assertEqual(variants.lookup('geohash'),
                         ('0123456789BCDEFGHJKMNPQRSTUVWXYZ', False))
        self.assertEqual(variants.lookup('wordsafe'),
                         ('23456789CFGHJMPQRVWXcfghjmpqrvwx', False))
        self.assertEqual(variants.lookup('z'),
                         ('YBNDRFG8EJKMCPQXOT1UWISZA345H769', False))

    def test_aliases(self):
        self.assertIs(variants.lookup('rfc3548'), variants.lookup('standard'))
        self.assertIs(variants.lookup('rfc4648-6'), variants.lookup('standard'))
        self.assertIs(variants.lookup('hexadecimal'), variants.lookup('hex'))
        self.assertIs(variants.lookup('rfc4648-7'), variants.lookup('hex'))
        self.assertEqual(variants.getAliases('hex'), ['hex', 'hexadecimal', 'rfc4648-7'])
        self.assertEqual(variants.getAliases('z'), ['z'])

    def test_default(self):
        self.assertEqual(variants.DEFAULT_VARIANT, 'standard')


class Lookup(unittest.TestCase):
    def test_unknown(self):
        e = self.assertRaises(InvalidVariant, variants.lookup, 'base32')
        self.assertEqual(e.name, 'base32')
        self.assertEqual(e.valid, ALL_NAMES)
        self.assertEqual(str(e),
            '`base32` is not a valid Base32 variant type! Only accept these values: '
            'crockford, geohash, hex, hexadecimal, rfc3548, rfc4648-6, rfc4648-7, standard, wordsafe, z')

    def test_case_sensitive(self):
        self.assertRaises(InvalidVariant, variants.lookup, 'Standard')
        self.assertRaises(InvalidVariant, variants.lookup, 'Z')

    def test_unhashable(self):
        self.assertRaises(InvalidVariant, variants.lookup, ['standard'])

    def test_is_value_error(self):
        self.assertRaises(ValueError, variants.lookup, 'nope')
