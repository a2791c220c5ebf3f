import base64
import binascii

from .errors import MalformedEncodingError


def encode_payload(data: bytes) -> str:
    """Standard padded Base64 of data as an ASCII string."""
    return base64.b64encode(data).decode('ascii')


def decode_payload(text: str) -> bytes:
    """Strict inverse of encode_payload.

    Rejects characters outside the standard alphabet, bad padding and
    lengths that are not a multiple of 4.
    """
    if len(text) % 4:
        raise MalformedEncodingError(f'Base64 length {len(text)} is not a multiple of 4')
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedEncodingError(f'invalid Base64 text: {e}') from e
