import argparse
import logging
import sys
from typing import List, Optional

from qr_transfer.core.base64_codec import decode_payload
from qr_transfer.core.decoding_qr import decode_image_bytes
from qr_transfer.core.errors import QRTransferError, TransferError
from qr_transfer.core.logging_config import setup_logging
from qr_transfer.core.scanning import collect_chunks, scan_directory

logger = logging.getLogger('qr_transfer.receiver')


def reassemble_directory(input_dir: str) -> bytes:
    """Scan every PNG in input_dir and rebuild the original bytes."""
    reassembler = collect_chunks(scan_directory(input_dir, decode_image_bytes))
    logger.info('Recovered %d of %s chunks', reassembler.received,
                reassembler.total if reassembler.total is not None else '?')
    return decode_payload(reassembler.finalize())


def decode_file(input_dir: str, output_file: str) -> int:
    """Rebuild the file from the QR images in input_dir. Returns bytes written."""
    data = reassemble_directory(input_dir)
    try:
        with open(output_file, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise TransferError(f'failed to write output file {output_file}: {e}') from e
    return len(data)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog='decode', description='Rebuild a file from a directory of QR code PNGs')
    ap.add_argument('input_dir', help='Directory containing the QR images')
    ap.add_argument('output_file', help='Path of the reconstructed file')
    args = ap.parse_args(argv)
    setup_logging()
    try:
        size = decode_file(args.input_dir, args.output_file)
    except QRTransferError as e:
        logger.error('decode failed: %s', e)
        return 1
    print(f"Reconstructed file saved to {args.output_file} ({size} bytes)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
