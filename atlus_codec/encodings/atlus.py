#!python3
# atlus-codec 2026
#
# Exposes registry codecs through the standard codecs machinery, so that
#   "text".encode("atlus-P4G_EFIGS")
#   open(path, encoding="atlus-P4G_EFIGS")
# work once register() has been called.

import codecs

from ..codec import complete_length
from ..errors import UnknownCharset

PREFIX = "atlus_"

def _normalize(name):
    return name.lower().replace("-", "_").replace(" ", "_")

def _check_encode_errors(atlus_codec, errors):
    if errors != 'strict':
        raise ValueError(f"{atlus_codec.name}: unsupported error handler {errors!r}")

def _held_surrogate(input):
    # a trailing high surrogate may be the first half of a pair
    return 1 if input and "\ud800" <= input[-1] <= "\udbff" else 0

class Codec(codecs.Codec):
    atlus_codec = None

    def encode(self, input, errors='strict'):
        _check_encode_errors(self.atlus_codec, errors)
        return (self.atlus_codec.encode(input), len(input))

    def decode(self, input, errors='strict'):
        data = bytes(input)
        return (self.atlus_codec.decode(data, errors), len(data))

class IncrementalEncoder(codecs.BufferedIncrementalEncoder):
    atlus_codec = None

    def _buffer_encode(self, input, errors, final):
        _check_encode_errors(self.atlus_codec, errors)
        end = len(input) if final else len(input) - _held_surrogate(input)
        return (self.atlus_codec.encode(input[:end]), end)

class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    atlus_codec = None

    def _buffer_decode(self, input, errors, final):
        data = bytes(input)
        end = len(data) if final else complete_length(data)
        return (self.atlus_codec.decode(data[:end], errors), end)

class StreamWriter(Codec, codecs.StreamWriter):
    pass

class StreamReader(Codec, codecs.StreamReader):

    def decode(self, input, errors='strict'):
        # leave a split pair in the reader's byte buffer
        data = bytes(input)
        end = complete_length(data)
        return (self.atlus_codec.decode(data[:end], errors), end)

### encodings module API
def getregentry(atlus_codec):
    def bind(cls):
        return type(f"{cls.__name__}-{atlus_codec.name}", (cls,), dict(atlus_codec=atlus_codec))
    codec = bind(Codec)()
    return codecs.CodecInfo(
        name=f"atlus-{atlus_codec.name}",
        encode=codec.encode,
        decode=codec.decode,
        incrementalencoder=bind(IncrementalEncoder),
        incrementaldecoder=bind(IncrementalDecoder),
        streamreader=bind(StreamReader),
        streamwriter=bind(StreamWriter),
    )

def make_search_function(registry):
    def codec_search_function(encoding_name):
        encoding_name = _normalize(encoding_name)
        if not encoding_name.startswith(PREFIX):
            return None
        wanted = encoding_name[len(PREFIX):]
        for name in registry.names():
            if _normalize(name) == wanted:
                try:
                    return getregentry(registry.get_or_create(name))
                except UnknownCharset:
                    return None
        return None
    return codec_search_function

def register(registry):
    search_function = make_search_function(registry)
    codecs.register(search_function)
    return search_function

def unregister(search_function):
    codecs.unregister(search_function)
