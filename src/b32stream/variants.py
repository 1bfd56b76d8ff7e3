# -*- test-case-name: b32stream.test.test_variants -*-

from collections import namedtuple

from .tokens import InvalidVariant


Variant = namedtuple('Variant', ['alphabet', 'padding'])

# several names share one specification, so identity comparisons between
# aliases hold

spec_standard = Variant('ABCDEFGHIJKLMNOPQRSTUVWXYZ234567', True)
spec_hex      = Variant('0123456789ABCDEFGHIJKLMNOPQRSTUV', True)

VARIANTS = {
    'crockford'  : Variant('0123456789ABCDEFGHJKMNPQRSTVWXYZ', False),
    'geohash'    : Variant('0123456789BCDEFGHJKMNPQRSTUVWXYZ', False),
    'hex'        : spec_hex,
    'hexadecimal': spec_hex,
    'rfc3548'    : spec_standard,
    'rfc4648-6'  : spec_standard,
    'rfc4648-7'  : spec_hex,
    'standard'   : spec_standard,
    'wordsafe'   : Variant('23456789CFGHJMPQRVWXcfghjmpqrvwx', False),
    'z'          : Variant('YBNDRFG8EJKMCPQXOT1UWISZA345H769', False),
}

DEFAULT_VARIANT = 'standard'

for _name, _spec in VARIANTS.items():
    assert len(_spec.alphabet) == 32, (_name, _spec.alphabet)
    assert len(set(_spec.alphabet)) == 32, (_name, _spec.alphabet)
    assert '=' not in _spec.alphabet, (_name, _spec.alphabet)

del _name, _spec


def lookup(name):
    try:
        return VARIANTS[name]
    except (KeyError, TypeError):
        # unhashable names end up here too
        raise InvalidVariant(name, VARIANTS) from None


def getVariantNames():
    return sorted(VARIANTS.keys())


def getAliases(name):
    """Every identifier that shares the specification of `name`,
    `name` included."""
    spec = lookup(name)
    return sorted(other for other, other_spec in VARIANTS.items() if other_spec is spec)
