''' JSON for DevTools envelopes. Every frame crossing the WebSocket goes
    through :func:`dumps` or :func:`loads` here, so the fastest installed
    library is picked once, at import time.
'''

# orjson is a declared dependency; msgspec is preferred when present, and
# the standard library is only reached in a bare environment.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


# msgspec and orjson both encode to bytes. The codec decodes the result to
# text for the WebSocket, so the stdlib flavor returns bytes too.

def json_dumps(*args, **kwargs):
    return json.dumps(*args, **kwargs).encode()


# Each library raises its own exception type for undecodable input. The
# codec catches whatever is collected here; orjson.JSONDecodeError and
# json.JSONDecodeError are both ValueError subclasses.

DecodeError = (ValueError,)

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = (ValueError, msgspec.DecodeError)
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
else:
    dumps = json_dumps
    loads = json.loads

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
