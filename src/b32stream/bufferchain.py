# -*- test-case-name: b32stream.test.test_bufferchain -*-

from collections import deque


class BufferChain:
    """A FIFO of byte chunks. Appending never copies; bytes are only
    joined when popleft() takes them out."""

    def __init__(self):
        self._chunks = deque()
        self._length = 0

    def __len__(self):
        return self._length

    def __bytes__(self):
        return b''.join(self._chunks)

    def append(self, data):
        # count bytes, not items of a wider buffer format
        data = bytes(data)
        if data:
            self._chunks.append(data)
            self._length += len(data)

    def appendleft(self, data):
        data = bytes(data)
        if data:
            self._chunks.appendleft(data)
            self._length += len(data)

    def popleft(self, count):
        # asking for more than we hold returns everything
        count = min(count, self._length)
        pieces = []
        needed = count

        while needed:
            chunk = self._chunks.popleft()
            if len(chunk) > needed:
                pieces.append(chunk[:needed])
                self._chunks.appendleft(chunk[needed:])
                needed = 0
            else:
                pieces.append(chunk)
                needed -= len(chunk)

        self._length -= count
        return b''.join(pieces)

    def popAligned(self, unit):
        """Take the largest prefix whose length is a multiple of `unit`."""
        return self.popleft(self._length // unit * unit)

    def clear(self):
        self._chunks.clear()
        self._length = 0
