import argparse
import logging
import os
import sys
from typing import List, Optional

from qr_transfer.core.base64_codec import encode_payload
from qr_transfer.core.chunking import split_text
from qr_transfer.core.config import TransferConfig
from qr_transfer.core.encoding_qr import frame_filename, render_qr_png
from qr_transfer.core.errors import QRTransferError, SymbolEncodeError, TransferError
from qr_transfer.core.logging_config import setup_logging
from qr_transfer.core.tagged_chunk import TaggedChunk, format_chunk

logger = logging.getLogger('qr_transfer.sender')


def write_qr_frame(chunk: TaggedChunk, out_dir: str, config: TransferConfig) -> str:
    try:
        png = render_qr_png(format_chunk(chunk), error_level=config.error_level,
                            scale=config.scale, border=config.border)
    except SymbolEncodeError as e:
        raise SymbolEncodeError(f'chunk {chunk.index}/{chunk.total}: {e}') from e
    fname = os.path.join(out_dir, frame_filename(chunk.index))
    try:
        with open(fname, 'wb') as f:
            f.write(png)
    except OSError as e:
        raise TransferError(f'failed to write QR image {fname}: {e}') from e
    return fname


def encode_file(input_file: str, out_dir: str, config: Optional[TransferConfig] = None) -> int:
    """Write one QR PNG per chunk of input_file into out_dir. Returns the chunk count."""
    config = config or TransferConfig()
    try:
        with open(input_file, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise TransferError(f'failed to read input file {input_file}: {e}') from e

    chunks = split_text(encode_payload(data), config.chunk_size)
    logger.debug('%d bytes -> %d chunks of up to %d characters', len(data), len(chunks), config.chunk_size)

    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as e:
        raise TransferError(f'failed to create output directory {out_dir}: {e}') from e

    for chunk in chunks:
        fname = write_qr_frame(chunk, out_dir, config)
        logger.debug('Wrote %s', fname)
    return len(chunks)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog='encode', description='Split a file into a series of QR code PNGs')
    ap.add_argument('input_file', help='File to send')
    ap.add_argument('output_dir', help='Output directory for QR images (created if missing)')
    args = ap.parse_args(argv)
    setup_logging()
    try:
        total = encode_file(args.input_file, args.output_dir, TransferConfig.from_env())
    except QRTransferError as e:
        logger.error('encode failed: %s', e)
        return 1
    print(f"Generated {total} QR codes in {args.output_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
