import io

import pytest

from netpbmkit.codec import Header, HeaderReader, decode, read_header
from netpbmkit.errors import FormatError


def test_reads_gray_header_and_stops_at_payload():
    preamble = b"P5\n# made by hand\n3 2\n255\n"
    stream = io.BytesIO(preamble + bytes(range(6)))
    header = read_header(stream)
    assert header == Header("P5", 3, 2, 255)
    assert stream.tell() == len(preamble)


def test_bitmap_header_has_no_max_value():
    stream = io.BytesIO(b"P4\n8 1\n\xff")
    header = HeaderReader(stream).read()
    assert header.max_value is None
    assert header.family.name == "bilevel"
    assert header.binary
    assert stream.read() == b"\xff"


def test_only_one_whitespace_byte_is_consumed():
    image = decode(b"P5\n2 1\n255\n\x20\x0a")
    assert image.row(0) == [32, 10]


def test_comments_between_every_token():
    header = read_header(io.BytesIO(b"P2\n# a\n4 # width\n# more\n5\n# max\n15\n"))
    assert (header.width, header.height, header.max_value) == (4, 5, 15)


def test_comment_may_follow_a_token_directly():
    image = decode(b"P2\n2 1# trailing\n255\n7 9\n")
    assert image.size == (2, 1)
    assert image.row(0) == [7, 9]


def test_comment_after_max_value_ends_the_header():
    stream = io.BytesIO(b"P5\n2 1\n255# raw data next\n\x0a\x20")
    assert read_header(stream) == Header("P5", 2, 1, 255)
    assert stream.read() == b"\x0a\x20"


def test_header_round_trips_through_bytes():
    header = Header("P3", 7, 1, 100)
    assert header.to_bytes() == b"P3\n7 1\n100\n"
    assert read_header(io.BytesIO(header.to_bytes())) == header


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"P7\n1 1\n",
        b"PX\n1 1\n",
        b"P1\nx 2\n",
        b"P2\n3\n",
        b"P2\n3 2\n",
        b"P2\n3 -2\n255\n",
        b"P2\n3 2\n0\n",
        b"P2\n3 2\n70000\n",
        b"P5\n1 1\n256\n\x00",
    ],
)
def test_malformed_headers(data):
    with pytest.raises(FormatError):
        read_header(io.BytesIO(data))


def test_sixteen_bit_plain_max_value_is_accepted():
    header = read_header(io.BytesIO(b"P2\n1 1\n1000\n999\n"))
    assert header.max_value == 1000
