import pytest
import hypothesis.strategies as st
from hypothesis import given, settings, Verbosity

from cryptopan.engine import CryptoPAn


keys = st.binary(min_size=32, max_size=32)
raw_addresses = st.binary(min_size=0, max_size=16)


def common_prefix_bits(a: bytes, b: bytes) -> int:
    """Number of leading bits two equal-length buffers share."""
    for i, (x, y) in enumerate(zip(a, b)):
        diff = x ^ y
        if diff:
            return i * 8 + (8 - diff.bit_length())
    return len(a) * 8


@st.composite
def prefix_pairs(draw):
    """Two equal-length buffers sharing at least `shared` leading bits."""
    first = draw(st.binary(min_size=1, max_size=16))
    shared = draw(st.integers(min_value=0, max_value=len(first) * 8))
    noise = draw(st.binary(min_size=len(first), max_size=len(first)))

    total = len(first) * 8
    keep = ((1 << shared) - 1) << (total - shared)
    value = int.from_bytes(first, "big")
    other = (value & keep) | (int.from_bytes(noise, "big") & ~keep & ((1 << total) - 1))
    return first, other.to_bytes(len(first), "big"), shared


@pytest.fixture(scope="module")
def engines():
    return {}


def _engine(engines, key):
    if key not in engines:
        engines[key] = CryptoPAn(key)
    return engines[key]


class TestPseudonymizationProperties:
    """Property tests over random keys and addresses."""

    @given(key=keys, data=raw_addresses)
    @settings(verbosity=Verbosity.quiet, max_examples=50, deadline=None)
    def test_roundtrip(self, engines, key, data):
        engine = _engine(engines, key)
        assert engine.depseudonymize(engine.pseudonymize(data)) == data
        assert engine.pseudonymize(engine.depseudonymize(data)) == data

    @given(key=keys, data=raw_addresses)
    @settings(verbosity=Verbosity.quiet, max_examples=50, deadline=None)
    def test_length_preserved(self, engines, key, data):
        assert len(_engine(engines, key).pseudonymize(data)) == len(data)

    @given(key=keys, pair=prefix_pairs())
    @settings(verbosity=Verbosity.quiet, max_examples=50, deadline=None)
    def test_prefix_preserved(self, engines, key, pair):
        first, second, shared = pair
        engine = _engine(engines, key)
        assert common_prefix_bits(first, second) >= shared
        assert common_prefix_bits(engine.pseudonymize(first), engine.pseudonymize(second)) >= shared

    @given(key=keys, pair=prefix_pairs())
    @settings(verbosity=Verbosity.quiet, max_examples=50, deadline=None)
    def test_prefix_length_exact(self, engines, key, pair):
        first, second, _ = pair
        engine = _engine(engines, key)
        # A bijection bit by bit: the first differing bit stays the first differing bit.
        assert (
            common_prefix_bits(engine.pseudonymize(first), engine.pseudonymize(second))
            == common_prefix_bits(first, second)
        )

    @given(key=keys)
    @settings(verbosity=Verbosity.quiet, max_examples=20, deadline=None)
    def test_empty_input(self, engines, key):
        assert _engine(engines, key).pseudonymize(b"") == b""
