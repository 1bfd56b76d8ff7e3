
from array import array

from twisted.trial import unittest

from b32stream.bufferchain import BufferChain


class T(unittest.TestCase):
    def test_len(self):
        c = BufferChain()
        c.append(b'ab')
        self.assertEqual(len(c), 2)
        c.append(b'')
        self.assertEqual(len(c), 2)
        c.append(b'c')
        self.assertEqual(len(c), 3)

    def test_bytes(self):
        c = BufferChain()
        c.append(b'ab')
        c.append(bytearray(b'c'))
        self.assertEqual(bytes(c), b'abc')

    def test_popleft(self):
        c = BufferChain()
        c.append(b'ab')
        self.assertEqual(c.popleft(1), b'a')
        self.assertEqual(bytes(c), b'b')
        self.assertEqual(c.popleft(1), b'b')
        self.assertEqual(bytes(c), b'')

        c.append(b'abc')
        self.assertEqual(c.popleft(2), b'ab')
        self.assertEqual(bytes(c), b'c')
        self.assertEqual(c.popleft(1), b'c')
        self.assertEqual(len(c), 0)

        # across chunk boundaries
        c.append(b'a')
        c.append(b'bc')
        c.append(b'de')
        self.assertEqual(c.popleft(4), b'abcd')
        self.assertEqual(bytes(c), b'e')
        self.assertEqual(len(c), 1)

        c.append(b'fg')
        s = c.popleft(10) # We just silently pop them all.
        self.assertEqual(s, b'efg')
        self.assertEqual(len(c), 0)

    def test_popleft_nothing(self):
        c = BufferChain()
        self.assertEqual(c.popleft(0), b'')
        self.assertEqual(c.popleft(3), b'')
        c.append(b'ab')
        self.assertEqual(c.popleft(0), b'')
        self.assertEqual(bytes(c), b'ab')

    def test_appendleft(self):
        c1 = BufferChain()
        c1.append(b'abcd')
        c1.popleft(1)
        c1.appendleft(b'ef')
        self.assertEqual(bytes(c1), b'efbcd')
        self.assertEqual(c1.popleft(1), b'e')
        self.assertEqual(c1.popleft(2), b'fb')
        self.assertEqual(c1.popleft(3), b'cd')

    def test_popAligned(self):
        c = BufferChain()
        for piece in (b'abc', b'defg', b'hijkl'):
            c.append(piece)
        self.assertEqual(c.popAligned(5), b'abcdefghij')
        self.assertEqual(bytes(c), b'kl')
        self.assertEqual(c.popAligned(5), b'')
        self.assertEqual(bytes(c), b'kl')

    def test_clear(self):
        c1 = BufferChain()
        c1.append(b'abcd')
        c1.clear()
        self.assertEqual(bytes(c1), b'')
        self.assertEqual(len(c1), 0)

    def test_wide_items(self):
        # two bytes per item: the length is counted in bytes
        c = BufferChain()
        c.append(array('H', [0x4141] * 3))
        self.assertEqual(len(c), 6)
        c.appendleft(memoryview(b'BBBB').cast('I'))
        self.assertEqual(len(c), 10)
        self.assertEqual(c.popAligned(5), b'BBBBA' + b'AAAAA')
        self.assertEqual(len(c), 0)
