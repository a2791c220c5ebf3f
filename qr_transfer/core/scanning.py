import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .config import IMAGE_EXTENSION
from .decoding_qr import Decoder
from .errors import MalformedChunkError, RasterDecodeError, TransferError
from .reassembly import ChunkReassembler
from .tagged_chunk import TaggedChunk, parse_chunk

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    source: str
    chunk: Optional[TaggedChunk] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.chunk is not None


def list_frames(input_dir: str) -> List[str]:
    """Sorted paths of the regular files in input_dir ending in .png."""
    try:
        names = sorted(os.listdir(input_dir))
    except OSError as e:
        raise TransferError(f'failed to read input directory {input_dir}: {e}') from e
    paths = []
    for name in names:
        path = os.path.join(input_dir, name)
        if os.path.splitext(name)[1] != IMAGE_EXTENSION or not os.path.isfile(path):
            continue
        paths.append(path)
    return paths


def _skip(source: str, reason: str) -> ScanResult:
    logger.warning('Skipping %s: %s', source, reason)
    return ScanResult(source, reason=reason)


def scan_file(path: str, decoder: Decoder) -> Iterator[ScanResult]:
    """Yield one result per QR payload in the file, or a single skip."""
    source = os.path.basename(path)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        yield _skip(source, f'cannot read file: {e}')
        return

    try:
        payloads = decoder(data)
    except RasterDecodeError as e:
        yield _skip(source, str(e))
        return

    if not payloads:
        yield _skip(source, 'no QR code found')
        return

    for text in payloads:
        try:
            chunk = parse_chunk(text)
        except MalformedChunkError as e:
            yield _skip(source, f'unexpected QR payload: {e}')
            continue
        yield ScanResult(source, chunk=chunk)


def scan_directory(input_dir: str, decoder: Decoder) -> Iterator[ScanResult]:
    """Best-effort scan of every PNG in input_dir.

    Only an unreadable directory is fatal; per-file and per-payload problems
    come back as skip results.
    """
    for path in list_frames(input_dir):
        yield from scan_file(path, decoder)


def collect_chunks(results: Iterable[ScanResult]) -> ChunkReassembler:
    reassembler = ChunkReassembler()
    for result in results:
        if result.ok:
            reassembler.add(result.chunk)
    return reassembler
