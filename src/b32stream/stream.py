# -*- test-case-name: b32stream.test.test_stream -*-

"""
stream.py: incremental Base32 encoding and decoding

Bytes arrive in chunks of any size. The chunkers hold back whatever does not
fill a complete group (5 raw bytes on the encode side, 8 symbols on the
decode side) and hand only whole groups to the codec, so no padding shows up
in the middle of a stream and no 8-symbol group is decoded in two halves.
Whatever is left over is pushed through the codec when the stream is closed.

The chunkers are plain objects with push() and close(). Base32EncoderStream
and Base32DecoderStream wrap them as IConsumers that write into another
consumer, and report errors through Deferreds instead of raising them into
the producer.
"""

from zope.interface import implementer

from twisted.internet import defer
from twisted.internet.interfaces import IConsumer
from twisted.logger import Logger
from twisted.python import failure

from .bufferchain import BufferChain
from .codec import Base32Encoder, Base32Decoder
from .tokens import StreamClosed


CHUNK_SIZE = 64 * 1024

ENCODE_GROUP = 5  # raw bytes per 8 symbols
DECODE_GROUP = 8  # symbols per 5 raw bytes


class BaseChunker:
    unit = None

    def __init__(self):
        self.closed  = False
        self._buffer = BufferChain()

    def pending(self):
        return len(self._buffer)

    def push(self, data):
        """Add a chunk, return the output for every complete group held so
        far (possibly b'')."""
        if self.closed:
            raise StreamClosed('{} is closed'.format(type(self).__name__))

        self._buffer.append(data)

        if len(self._buffer) < self.unit:
            return b''

        return self._run(self._buffer.popAligned(self.unit), final=False)

    def close(self):
        """Flush the remainder, return the final output."""
        if self.closed:
            raise StreamClosed('{} is closed'.format(type(self).__name__))

        self.closed = True
        return self._run(self._buffer.popleft(len(self._buffer)), final=True)

    def _run(self, data, final):
        try:
            return self.transform(data, final)
        except Exception:
            # nothing after a rejected group is processed
            self.closed = True
            self._buffer.clear()
            raise

    def transform(self, data, final):
        raise NotImplementedError


class EncodeChunker(BaseChunker):
    unit = ENCODE_GROUP
    encoderClass = Base32Encoder

    def __init__(self, variant=None, padding=None):
        super().__init__()
        self.encoder = self.encoderClass(variant, padding)

    @property
    def variant(self):
        return self.encoder.variant

    @property
    def padding(self):
        return self.encoder.padding

    def transform(self, data, final):
        # interior groups are whole 5-byte groups, which encode to whole
        # 8-symbol blocks and so never pick up padding
        return self.encoder.encodeToBytes(data)


class DecodeChunker(BaseChunker):
    unit = DECODE_GROUP
    decoderClass = Base32Decoder

    def __init__(self, variant=None):
        super().__init__()
        self.decoder = self.decoderClass(variant)

    @property
    def variant(self):
        return self.decoder.variant

    def transform(self, data, final):
        return self.decoder.decodeToBytes(data)


@implementer(IConsumer)
class StreamAdapter:
    log = Logger()

    chunkerClass = None

    def __init__(self, consumer, **options):
        # build the chunker first so a bad variant fails before anything is
        # attached
        self.chunker  = self.chunkerClass(**options)
        self.consumer = consumer
        self.producer = None
        self.finished = False
        self.failure  = None
        self._watchers = []

    @property
    def closed(self):
        return self.finished or self.failure is not None

    def registerProducer(self, producer, streaming):
        self.producer = producer
        register = getattr(self.consumer, 'registerProducer', None)
        if register is not None:
            register(producer, streaming)

    def unregisterProducer(self):
        self.producer = None
        unregister = getattr(self.consumer, 'unregisterProducer', None)
        if unregister is not None:
            unregister()

    def write(self, data):
        self._checkOpen()
        try:
            output = self.chunker.push(data)
            if output:
                self.consumer.write(output)
        except Exception:
            self._fail(failure.Failure())

    def finish(self):
        self._checkOpen()
        try:
            output = self.chunker.close()
            if output:
                self.consumer.write(output)
        except Exception:
            self._fail(failure.Failure())
            return

        self.finished = True
        self.log.debug('{stream!r} finished', stream=self)

        watchers, self._watchers = self._watchers, []
        for d in watchers:
            d.callback(self.consumer)

    def whenDone(self):
        """Return a Deferred that fires with the downstream consumer once
        finish() has flushed everything, or errbacks with the failure that
        terminated the stream."""
        if self.finished:
            return defer.succeed(self.consumer)
        if self.failure is not None:
            return defer.fail(self.failure)
        d = defer.Deferred()
        self._watchers.append(d)
        return d

    def _checkOpen(self):
        if self.finished:
            raise StreamClosed('{!r} is already finished'.format(self))
        if self.failure is not None:
            raise StreamClosed('{!r} was terminated: {}'.format(self, self.failure.getErrorMessage()))

    def _fail(self, why):
        self.failure = why
        self.log.warn('{stream!r} terminated: {error}', stream=self, error=why.getErrorMessage())

        if self.producer is not None:
            producer, self.producer = self.producer, None
            producer.stopProducing()

        watchers, self._watchers = self._watchers, []
        for d in watchers:
            d.errback(why)

    def __repr__(self):
        return '<{} variant={!r}>'.format(type(self).__name__, self.chunker.variant)


class Base32EncoderStream(StreamAdapter):
    """Encode everything written to it, write the symbols to `consumer`."""
    chunkerClass = EncodeChunker

    def __init__(self, consumer, variant=None, padding=None):
        super().__init__(consumer, variant=variant, padding=padding)

    @property
    def padding(self):
        return self.chunker.padding


class Base32DecoderStream(StreamAdapter):
    """Decode the symbols written to it, write the raw bytes to `consumer`."""
    chunkerClass = DecodeChunker

    def __init__(self, consumer, variant=None):
        super().__init__(consumer, variant=variant)


def _pump(instream, stream, chunkSize):
    while not stream.closed:
        try:
            data = instream.read(chunkSize)
        except Exception:
            stream._fail(failure.Failure())
            break
        if not data:
            stream.finish()
            break
        stream.write(data)


def encodeStream(instream, outstream, variant=None, padding=None, chunkSize=CHUNK_SIZE):
    """Encode the file-like `instream` into `outstream` chunk by chunk.
    Returns a Deferred that fires with `outstream`."""
    stream = Base32EncoderStream(outstream, variant=variant, padding=padding)
    d = stream.whenDone()
    _pump(instream, stream, chunkSize)
    return d


def decodeStream(instream, outstream, variant=None, chunkSize=CHUNK_SIZE):
    """Decode the file-like `instream` into `outstream` chunk by chunk.
    Returns a Deferred that fires with `outstream`."""
    stream = Base32DecoderStream(outstream, variant=variant)
    d = stream.whenDone()
    _pump(instream, stream, chunkSize)
    return d


def _iterate(chunker, chunks):
    for chunk in chunks:
        output = chunker.push(chunk)
        if output:
            yield output
    output = chunker.close()
    if output:
        yield output


def encodeChunks(chunks, variant=None, padding=None):
    """Generator over the encoded output of an iterable of byte chunks."""
    return _iterate(EncodeChunker(variant, padding), chunks)


def decodeChunks(chunks, variant=None):
    return _iterate(DecodeChunker(variant), chunks)
