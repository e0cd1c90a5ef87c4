"""
Minimal DER encoder for key fingerprints

Only the two constructs the fingerprint needs are supported:
UTF8String and SEQUENCE. Every value is tag-length-value encoded
with definite lengths, so equal content always yields equal bytes
and no two different element lists share an encoding.
"""

from typing import Union

from ..exceptions import ArgumentShapeError

TAG_UTF8_STRING = 0x0C
TAG_SEQUENCE = 0x30


def encode_length(length: int) -> bytes:
    """Encode a DER definite length (short form below 128, long form otherwise)"""
    if length < 0:
        raise ArgumentShapeError(f"DER length cannot be negative: {length}")

    if length < 0x80:
        return bytes([length])

    body = length.to_bytes((length.bit_length() + 7) // 8, 'big')
    return bytes([0x80 | len(body)]) + body


def encode_tlv(tag: int, content: bytes) -> bytes:
    return bytes([tag]) + encode_length(len(content)) + content


def encode_utf8_string(value: Union[str, bytes]) -> bytes:
    """
    Encode a UTF8String

    str values are encoded as UTF-8; bytes are taken as already encoded.
    """
    if isinstance(value, str):
        content = value.encode('utf-8')
    elif isinstance(value, (bytes, bytearray)):
        content = bytes(value)
    else:
        raise ArgumentShapeError(
            "UTF8String value must be str or bytes",
            received=type(value).__name__
        )
    return encode_tlv(TAG_UTF8_STRING, content)


def encode_sequence(*elements: bytes) -> bytes:
    """Wrap already-encoded elements in a SEQUENCE"""
    return encode_tlv(TAG_SEQUENCE, b''.join(elements))
