# -*- test-case-name: b32stream.test.test_tool -*-

import sys

from twisted.python import failure, usage

from . import variants
from .stream import CHUNK_SIZE, encodeStream, decodeStream
from .tokens import Base32Error


class _CodecOptions(usage.Options):
    optParameters = [
        ('variant', 'v', variants.DEFAULT_VARIANT, 'Base32 variant, see "b32tool variants"'),
        ('chunk-size', 'c', CHUNK_SIZE, 'read this many bytes at a time', int),
    ]

    def parseArgs(self, infile=None, outfile=None):
        self['infile']  = infile
        self['outfile'] = outfile

    def postOptions(self):
        try:
            variants.lookup(self['variant'])
        except Base32Error as exc:
            raise usage.UsageError(str(exc))
        if self['chunk-size'] < 1:
            raise usage.UsageError('--chunk-size must be positive')


class EncodeOptions(_CodecOptions):
    synopsis = 'Usage: b32tool encode [options] [INFILE [OUTFILE]]'

    optFlags = [
        ('padding', 'p', 'always pad with "=" to a multiple of 8 symbols'),
        ('no-padding', 'n', 'never pad'),
    ]

    def postOptions(self):
        super().postOptions()
        if self['padding'] and self['no-padding']:
            raise usage.UsageError('--padding and --no-padding are mutually exclusive')

    def getPadding(self):
        if self['padding']:
            return True
        if self['no-padding']:
            return False
        return None


class DecodeOptions(_CodecOptions):
    synopsis = 'Usage: b32tool decode [options] [INFILE [OUTFILE]]'


class VariantsOptions(usage.Options):
    synopsis = 'Usage: b32tool variants'


class Options(usage.Options):
    synopsis = 'Usage: b32tool (encode|decode|variants) [options]'

    subCommands = [
        ('encode',   None, EncodeOptions,   'Encode bytes to Base32'),
        ('decode',   None, DecodeOptions,   'Decode Base32 to bytes'),
        ('variants', None, VariantsOptions, 'List the known variants'),
    ]

    def postOptions(self):
        if not self.subCommand:
            raise usage.UsageError('a command is required')


def listVariants(out):
    for name in variants.getVariantNames():
        spec = variants.lookup(name)
        line = '{:<12} {} {}\n'.format(name, spec.alphabet, 'padded' if spec.padding else 'unpadded')
        out.write(line.encode('ascii'))


def _run_codec(command, opts, stdin, stdout):
    infile = open(opts['infile'], 'rb') if opts['infile'] not in (None, '-') else stdin
    try:
        outfile = open(opts['outfile'], 'wb') if opts['outfile'] not in (None, '-') else stdout
        try:
            if command == 'encode':
                d = encodeStream(infile, outfile, opts['variant'], opts.getPadding(), opts['chunk-size'])
            else:
                d = decodeStream(infile, outfile, opts['variant'], opts['chunk-size'])
            # the streams run synchronously, so d has already fired
            results = []
            d.addBoth(results.append)
            result = results[0]
        finally:
            if outfile is not stdout:
                outfile.close()
    finally:
        if infile is not stdin:
            infile.close()

    if isinstance(result, failure.Failure):
        result.trap(Base32Error, OSError)
        raise result.value


def run(argv=None, stdin=None, stdout=None, stderr=None):
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer
    if stderr is None:
        stderr = sys.stderr

    config = Options()

    try:
        config.parseOptions(argv)
    except usage.UsageError as exc:
        stderr.write('{}\n'.format(config.getSynopsis()))
        stderr.write('b32tool: {}\n'.format(exc))
        return 1

    command = config.subCommand
    opts = config.subOptions

    if command == 'variants':
        listVariants(stdout)
        return 0

    try:
        _run_codec(command, opts, stdin, stdout)
    except (Base32Error, OSError) as exc:
        stderr.write('b32tool: {}\n'.format(exc))
        return 1

    return 0


def main():
    sys.exit(run())
