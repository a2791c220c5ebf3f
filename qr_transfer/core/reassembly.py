import logging
from typing import Dict, Iterable, List, Optional

from .errors import MissingChunkError, MissingTotalError
from .tagged_chunk import TaggedChunk

logger = logging.getLogger(__name__)

# The declared total comes from an untrusted payload, so gap reports stop early
MISSING_REPORT_LIMIT = 20


class ChunkReassembler:
    """Collects tagged chunks in any order and joins them by index.

    The first total seen is authoritative; later chunks declaring another
    total are kept but reported. A repeated index replaces the earlier data.
    """

    def __init__(self):
        self.chunks: Dict[int, str] = {}
        self.total: Optional[int] = None

    def add(self, chunk: TaggedChunk):
        if self.total is None:
            self.total = chunk.total
        elif chunk.total != self.total:
            logger.warning('Inconsistent total: chunk %d declares %d chunks, keeping %d',
                           chunk.index, chunk.total, self.total)

        previous = self.chunks.get(chunk.index)
        if previous is not None and previous != chunk.data:
            logger.warning('Conflicting data for chunk %d, keeping the latest copy', chunk.index)
        if chunk.index >= self.total:
            logger.debug('Chunk %d is outside the expected range [0, %d)', chunk.index, self.total)
        self.chunks[chunk.index] = chunk.data

    def extend(self, chunks: Iterable[TaggedChunk]):
        for chunk in chunks:
            self.add(chunk)

    @property
    def received(self) -> int:
        if self.total is None:
            return 0
        return sum(1 for idx in self.chunks if idx < self.total)

    def missing(self, limit: int = MISSING_REPORT_LIMIT) -> List[int]:
        """The first `limit` indices in [0, total) not seen yet."""
        gaps = []
        if self.total is None:
            return gaps
        for i in range(self.total):
            if i not in self.chunks:
                gaps.append(i)
                if len(gaps) >= limit:
                    break
        return gaps

    def finalize(self) -> str:
        """Concatenate chunks 0..total-1 in index order."""
        if self.total is None or self.total <= 0:
            raise MissingTotalError()
        parts = []
        for i in range(self.total):
            data = self.chunks.get(i)
            if data is None:
                raise MissingChunkError(i, self.missing())
            parts.append(data)
        return ''.join(parts)
