"""
b32stream: Base32 in several alphabets, over whole buffers or streams

Supported variants: crockford, geohash, hex, hexadecimal, rfc3548,
rfc4648-6, rfc4648-7, standard, wordsafe and z (z-base-32).
"""

from .tokens import Base32Error, InvalidVariant, InvalidCharacter, StreamClosed
from .variants import Variant, DEFAULT_VARIANT, lookup, getVariantNames
from .codec import Base32Encoder, Base32Decoder
from .stream import (
    EncodeChunker,
    DecodeChunker,
    Base32EncoderStream,
    Base32DecoderStream,
    encodeStream,
    decodeStream,
    encodeChunks,
    decodeChunks,
)

__version__ = "0.1.0"

__all__ = [
    "Base32Error",
    "InvalidVariant",
    "InvalidCharacter",
    "StreamClosed",

    "Variant",
    "DEFAULT_VARIANT",
    "lookup",
    "getVariantNames",

    "Base32Encoder",
    "Base32Decoder",

    "EncodeChunker",
    "DecodeChunker",
    "Base32EncoderStream",
    "Base32DecoderStream",
    "encodeStream",
    "decodeStream",
    "encodeChunks",
    "decodeChunks",
]
