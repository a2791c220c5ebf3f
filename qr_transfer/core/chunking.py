from typing import Iterator, List, Tuple

from .config import CHUNK_SIZE
from .tagged_chunk import TaggedChunk


def iter_text_chunks(text: str, chunk_size: int = CHUNK_SIZE) -> Iterator[Tuple[int, str]]:
    """Yield (index, data) pieces of text, each at most chunk_size long.

    The last piece holds the remainder and may be empty only when text is
    empty, so there is always at least one piece.
    """
    if chunk_size <= 0:
        raise ValueError(f'chunk_size must be positive, got {chunk_size}')
    idx = 0
    offset = 0
    while len(text) - offset > chunk_size:
        yield idx, text[offset:offset + chunk_size]
        offset += chunk_size
        idx += 1
    yield idx, text[offset:]


def split_text(text: str, chunk_size: int = CHUNK_SIZE) -> List[TaggedChunk]:
    pieces = list(iter_text_chunks(text, chunk_size))
    total = len(pieces)
    return [TaggedChunk(idx, total, data) for idx, data in pieces]
