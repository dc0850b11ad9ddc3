import pytest

from utils import ip_codec


@pytest.mark.parametrize("text, packed", [
    ("192.0.2.1", b"\xc0\x00\x02\x01"),
    ("0.0.0.0", b"\x00\x00\x00\x00"),
    ("::1", bytes(15) + b"\x01"),
    ("2001:db8::", b"\x20\x01\x0d\xb8" + bytes(12)),
])
def test_encode(text, packed):
    """Test text addresses encode to their packed form."""
    assert ip_codec.encode(text) == packed


def test_encode_strips_whitespace():
    assert ip_codec.encode(" 10.0.0.1\n") == b"\x0a\x00\x00\x01"


def test_decode_ipv4():
    assert ip_codec.decode(b"\xc0\x00\x02\x01") == "192.0.2.1"


def test_decode_ipv6_is_compressed():
    """Test IPv6 decodes to compressed notation."""
    assert ip_codec.decode(b"\x20\x01\x0d\xb8" + bytes(11) + b"\x01") == "2001:db8::1"


def test_decode_accepts_bytearray():
    assert ip_codec.decode(bytearray(b"\x0a\x00\x00\x01")) == "10.0.0.1"


@pytest.mark.parametrize("text", ["192.0.2", "256.0.0.1", "2001:db8:::1", "example.com", ""])
def test_encode_rejects_invalid_text(text):
    with pytest.raises(ValueError):
        ip_codec.encode(text)


@pytest.mark.parametrize("length", [0, 3, 5, 15, 17])
def test_decode_rejects_invalid_length(length):
    with pytest.raises(ValueError):
        ip_codec.decode(bytes(length))


def test_is_ipv4():
    assert ip_codec.is_ipv4("8.8.8.8")
    assert not ip_codec.is_ipv4("2001:4860:4860::8888")
