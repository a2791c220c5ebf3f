"""Wire format of a single QR payload: ``<index>/<total>:<data>``."""
from typing import NamedTuple

from .errors import MalformedChunkError

META_SEPARATOR = ':'
TOTAL_SEPARATOR = '/'


class TaggedChunk(NamedTuple):
    index: int
    total: int
    data: str


def format_chunk(chunk: TaggedChunk) -> str:
    return f'{chunk.index}{TOTAL_SEPARATOR}{chunk.total}{META_SEPARATOR}{chunk.data}'


def _parse_count(value: str, field: str, text: str) -> int:
    # int() alone would also take signs, spaces, underscores and non-ASCII digits
    if not value or not (value.isascii() and value.isdigit()):
        raise MalformedChunkError(f'{field} is not a decimal number: {value!r} in {_preview(text)!r}')
    return int(value)


def _preview(text: str, limit: int = 40) -> str:
    return text if len(text) <= limit else text[:limit] + '...'


def parse_chunk(text: str) -> TaggedChunk:
    """Parse a QR payload string into a TaggedChunk.

    Raises MalformedChunkError when the separators are missing or the
    index/total fields are not non-negative decimal integers.
    """
    meta, sep, data = text.partition(META_SEPARATOR)
    if not sep:
        raise MalformedChunkError(f'missing {META_SEPARATOR!r} separator in {_preview(text)!r}')
    index_str, sep, total_str = meta.partition(TOTAL_SEPARATOR)
    if not sep:
        raise MalformedChunkError(f'missing {TOTAL_SEPARATOR!r} in chunk metadata {meta!r}')
    index = _parse_count(index_str, 'index', text)
    total = _parse_count(total_str, 'total', text)
    return TaggedChunk(index, total, data)
