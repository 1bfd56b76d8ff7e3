# -*- test-case-name: b32stream.test.test_base32 -*-

# bit accumulator after the waterken.org Web-Calculus python implementation

from .tokens import InvalidCharacter


PAD = b'='

ord_pad, = PAD

# alphabet bytes -> 256-entry table of symbol values, -1 for non-members
_reverse_tables = {}


def _asAlphabet(alphabet):
    if isinstance(alphabet, str):
        alphabet = alphabet.encode('ascii')
    assert len(alphabet) == 32, alphabet
    return bytes(alphabet)


def _reverseTable(alphabet):
    table = _reverse_tables.get(alphabet)
    if table is None:
        table = [-1] * 256
        for value, ch in enumerate(alphabet):
            table[ch] = value
        _reverse_tables[alphabet] = table
    return table


def encodedLength(size, padding=False):
    """Number of symbols `encode` produces for `size` input bytes."""
    length = (size * 8 + 4) // 5
    if padding:
        length = (length + 7) // 8 * 8
    return length


def encode(input, alphabet, padding=False):
    """Pack the bits of `input` (MSB first) into 5-bit symbols of
    `alphabet`. A final group shorter than 5 bits is filled with zero bits;
    with `padding` the result is filled with '=' up to a multiple of 8
    symbols. Returns bytes."""
    alphabet = _asAlphabet(alphabet)
    output = bytearray()
    buffer = 0
    n = 0

    for b in input:
        buffer = (buffer << 8) | b
        n += 8
        while n >= 5:
            n -= 5
            output.append(alphabet[buffer >> n])
            buffer &= (1 << n) - 1

    if n > 0:
        output.append(alphabet[buffer << (5 - n)])

    if padding and len(output) % 8:
        output.extend(PAD * (8 - len(output) % 8))

    return bytes(output)


def decode(input, alphabet, variant=None):
    """Reverse `encode`. Any '=' is dropped wherever it appears. Symbols
    outside `alphabet` and a non-zero trailing partial group raise
    InvalidCharacter, which names `variant`."""
    if isinstance(input, str):
        try:
            input = input.encode('ascii')
        except UnicodeEncodeError:
            raise InvalidCharacter(variant) from None

    table = _reverseTable(_asAlphabet(alphabet))
    output = bytearray()
    buffer = 0
    n = 0

    for c in input:
        if c == ord_pad:
            continue
        value = table[c]
        if value < 0:
            raise InvalidCharacter(variant)
        buffer = (buffer << 5) | value
        n += 5
        if n >= 8:
            n -= 8
            output.append(buffer >> n)
            buffer &= (1 << n) - 1

    # the encoder only ever fills with zero bits
    if buffer:
        raise InvalidCharacter(variant)

    return bytes(output)


def isBase32(s, alphabet):
    if isinstance(s, str):
        if not s.isascii():
            return False
        s = s.encode('ascii')
    table = _reverseTable(_asAlphabet(alphabet))
    for c in s:
        if c != ord_pad and table[c] < 0:
            return False
    return True
