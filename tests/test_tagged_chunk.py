"""Tests for the index/total:data wire format."""

import pytest

from qr_transfer.core.errors import MalformedChunkError
from qr_transfer.core.tagged_chunk import TaggedChunk, format_chunk, parse_chunk


def test_format_chunk():
    assert format_chunk(TaggedChunk(0, 4, 'QUJD')) == '0/4:QUJD'
    assert format_chunk(TaggedChunk(12, 130, '')) == '12/130:'


def test_parse_chunk():
    assert parse_chunk('3/4:QUJD+/==') == TaggedChunk(3, 4, 'QUJD+/==')


def test_parse_splits_on_first_separators_only():
    assert parse_chunk('1/2:a:b/c') == TaggedChunk(1, 2, 'a:b/c')


def test_parse_empty_data():
    assert parse_chunk('0/1:') == TaggedChunk(0, 1, '')


def test_parse_keeps_zero_total():
    # a zero total is rejected later, when reassembling
    assert parse_chunk('0/0:abc').total == 0


@pytest.mark.parametrize('text', [
    'not-a-chunk',
    '0/4',
    '04:abc',
    'x/4:abc',
    '0/y:abc',
    '/4:abc',
    '0/:abc',
    '-1/4:abc',
    '+1/4:abc',
    ' 1/4:abc',
    '1/4 :abc',
    '١/4:abc',
    '',
])
def test_parse_rejects_malformed_payloads(text):
    with pytest.raises(MalformedChunkError):
        parse_chunk(text)


def test_parse_inverts_format():
    chunk = TaggedChunk(7, 9, 'abc+/def==')
    assert parse_chunk(format_chunk(chunk)) == chunk
