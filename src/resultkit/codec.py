"""Codec for encoding and decoding Results with msgspec.

Ok and Error are tagged structs, so a Result encodes as an object with a
``kind`` field:

    {"kind": "ok", "value": 42}
    {"kind": "error", "error": "not found"}

Key components:
    - ResultCodec: typed encoder/decoder for one Result[T, E] shape

Thread Safety:
    - Encoders are NOT thread-safe -> use thread-local instances
    - Decoders ARE thread-safe (reentrant) -> can share
    - ResultCodec handles this automatically

Usage:
    >>> codec = ResultCodec(int, str)
    >>> codec.decode(codec.encode(Ok(42)))
    Ok(value=42)
    >>> codec.decode(b'{"kind": "error", "error": "not found"}')
    Error(error='not found')
"""

from __future__ import annotations

import threading
from typing import Any, Literal

import msgspec

from resultkit.result import Error, Ok, Result, from_execution

__all__ = ['ResultCodec']

type WireFormat = Literal['json', 'msgpack']


class ResultCodec[T, E]:
    """Encoder/decoder for Result[T, E] over JSON or MessagePack.

    Encoding an Error whose payload msgspec cannot serialize (such as an
    exception captured by from_execution) raises TypeError; map the error
    to a serializable value first.

    Example:
        >>> codec = ResultCodec(int, str, protocol='msgpack')
        >>> codec.decode(codec.encode(Error('boom')))
        Error(error='boom')
    """

    __slots__ = ('_decoder', '_local', '_protocol')

    def __init__(self, value_type: type[T], error_type: type[E], *, protocol: WireFormat = 'json') -> None:
        """Create a codec for one Result shape.

        Args:
            value_type: Type of the Ok value.
            error_type: Type of the Error payload.
            protocol: Wire format, 'json' or 'msgpack'.

        Raises:
            ValueError: If protocol is unknown.
        """
        if protocol not in ('json', 'msgpack'):
            msg = f'Unknown protocol: {protocol!r}'
            raise ValueError(msg)
        result_type: Any = Ok[value_type] | Error[error_type]  # type: ignore[valid-type]
        self._protocol = protocol
        self._local = threading.local()
        if protocol == 'json':
            self._decoder: Any = msgspec.json.Decoder(result_type)
        else:
            self._decoder = msgspec.msgpack.Decoder(result_type)

    @property
    def protocol(self) -> WireFormat:
        """The wire format of this codec."""
        return self._protocol

    @property
    def _encoder(self) -> msgspec.json.Encoder | msgspec.msgpack.Encoder:
        """Get or create the thread-local encoder."""
        encoder = getattr(self._local, 'encoder', None)
        if encoder is None:
            encoder = msgspec.json.Encoder() if self._protocol == 'json' else msgspec.msgpack.Encoder()
            self._local.encoder = encoder
        return encoder

    def encode(self, result: Result[T, E]) -> bytes:
        """Encode a Result to bytes.

        Raises:
            TypeError: If the payload type is not supported by msgspec.
        """
        return self._encoder.encode(result)

    def decode(self, data: bytes | bytearray | memoryview | str) -> Result[T, E]:
        """Decode bytes into a Result.

        Raises:
            msgspec.DecodeError: If data is malformed.
            msgspec.ValidationError: If data does not match Result[T, E].
        """
        return self._decoder.decode(data)

    def try_decode(self, data: bytes | bytearray | memoryview | str) -> Result[Result[T, E], msgspec.DecodeError]:
        """Decode bytes, capturing decode failures into Error.

        ValidationError is a subclass of DecodeError, so both are captured.
        """
        return from_execution(lambda: self.decode(data), exceptions=(msgspec.DecodeError,))

    def __repr__(self) -> str:
        return f'ResultCodec(protocol={self._protocol!r})'
