"""Shared pytest fixtures for all tests."""

import logging
import os

import pytest

from qr_transfer.core.errors import RasterDecodeError
from qr_transfer.core.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def payload():
    """3000 deterministic bytes covering every byte value."""
    return bytes((i * 7 + 3) % 256 for i in range(3000))


@pytest.fixture
def text_decoder():
    """
    Stand-in for the QR scanner: each "image" file holds its payload lines
    as plain text. Files starting with b'\\x00' are treated as broken rasters.

    Returns:
        Decoder callable
    """
    def decode(data):
        if data.startswith(b'\x00'):
            raise RasterDecodeError('not a readable image: corrupt')
        text = data.decode('utf-8')
        return [line for line in text.split('\n') if line]
    return decode


@pytest.fixture
def write_frames(tmp_path):
    """
    Write payload strings as fake frame files.

    Returns:
        Function(frames: dict name -> text, subdir) -> directory path
    """
    def write(frames, subdir='frames'):
        frame_dir = tmp_path / subdir
        frame_dir.mkdir(exist_ok=True)
        for name, content in frames.items():
            data = content if isinstance(content, bytes) else content.encode('utf-8')
            (frame_dir / name).write_bytes(data)
        return str(frame_dir)
    return write


@pytest.fixture
def zbar():
    """Skip unless pyzbar and the zbar shared library can both be loaded."""
    pytest.importorskip('pyzbar.pyzbar')
    from pyzbar import zbar_library
    try:
        zbar_library.load()
    except ImportError as e:
        pytest.skip(f'zbar shared library not available: {e}')
