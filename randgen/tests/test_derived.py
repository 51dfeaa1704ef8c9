import base64
import re
import string
from collections import Counter

import pytest

from randgen import BASE64_ALPHABET, HEX_ALPHABET, get_boolean, get_float, get_string
from randgen.derived import sample_string, word_to_float
from randgen.errors import DomainError, InvalidArgumentError
from randgen.utils.args import is_power_of_two
from randgen.utils.bytes import take_bits

from .helpers import ConstantSource, ScriptedSource

_HEX_RE = re.compile(r"^[0-9a-f]+$")
_B64_RE = re.compile(r"^[0-9a-zA-Z+/]+$")


# ---------- booleans ----------


def test_rand_boolean():
    seen = set()
    for _ in range(511):
        v = get_boolean()
        assert isinstance(v, bool)
        seen.add(v)
    assert seen == {True, False}


def test_boolean_maps_one_to_true(make_rand):
    r = make_rand(secure=ScriptedSource([b"\x01", b"\x00", b"\xfe"]))
    assert r.get_boolean() is True
    assert r.get_boolean() is False
    # 0xfe masked to 1 bit -> 0
    assert r.get_boolean() is False


def test_boolean_fast(rand):
    assert {rand.get_boolean(secure=False) for _ in range(200)} == {True, False}


# ---------- floats ----------


def test_rand_float():
    for _ in range(511):
        v = get_float()
        assert isinstance(v, float)
        assert 0.0 <= v <= 1.0


def test_float_endpoints_are_reachable(make_rand):
    r = make_rand(secure=ScriptedSource([b"\x00" * 8, b"\xff" * 8]))
    assert r.get_float() == 0.0
    assert r.get_float() == 1.0


def test_float_width_follows_config(make_rand):
    src = ScriptedSource([b"\x80\x00\x00\x00"])
    r = make_rand(secure=src, float_bits=32)
    assert r.get_float() == pytest.approx(0x80000000 / 0xFFFFFFFF)
    assert src.requests == [4]


def test_float_never_rejects(make_rand):
    src = ConstantSource(0xFF)
    r = make_rand(secure=src, max_redraws=1)
    assert r.get_float() == 1.0
    assert src.calls == 1


def test_word_to_float_bounds():
    assert word_to_float(0, 32) == 0.0
    assert word_to_float(2**32 - 1, 32) == 1.0
    with pytest.raises(ValueError):
        word_to_float(2**32, 32)


def test_fast_floats_spread(rand):
    values = [rand.get_float(secure=False) for _ in range(1000)]
    assert min(values) < 0.1
    assert max(values) > 0.9


# ---------- strings ----------


def test_get_string_hex():
    for length in range(1, 512):
        s = get_string(length, "0123456789abcdef")
        assert len(s) == length
        assert _HEX_RE.match(s)


def test_get_string_base64():
    for length in range(1, 512):
        s = get_string(length)
        assert len(s) == length
        assert _B64_RE.match(s)


def test_base64_fast_path_matches_base64_encoding(make_rand):
    src = ScriptedSource([b"Man", b"\x00\x00\x00", b"\xff\xff\xff"])
    r = make_rand(secure=src)
    assert r.get_string(4) == base64.b64encode(b"Man").decode() == "TWFu"
    assert r.get_string(4) == "AAAA"
    assert r.get_string(4) == "////"
    assert src.requests == [3, 3, 3]


def test_power_of_two_alphabet_consumes_exact_bits(make_rand):
    # 3 hex chars need 12 bits -> 2 bytes; trailing nibble is unused
    src = ScriptedSource([b"\x12\x34"])
    r = make_rand(secure=src)
    assert r.get_string(3, HEX_ALPHABET) == "123"
    assert src.requests == [2]


def test_general_alphabet_uses_rejection(make_rand):
    # size 3 -> span 2 -> 2 bits per candidate; 3 is rejected
    src = ScriptedSource([b"\x03", b"\x02", b"\x00"])
    r = make_rand(secure=src)
    assert r.get_string(2, "abc") == "ca"
    assert src.requests == [1, 1, 1]


def test_single_character_alphabet_consumes_nothing(make_rand):
    src = ScriptedSource([])
    r = make_rand(secure=src)
    assert r.get_string(5, "x") == "xxxxx"
    assert src.requests == []


def test_repeated_characters_are_allowed(rand):
    s = rand.get_string(200, "aab")
    assert set(s) <= {"a", "b"}
    assert len(s) == 200


@pytest.mark.parametrize(
    "alphabet", [string.ascii_lowercase, "0123456789", HEX_ALPHABET, BASE64_ALPHABET, "αβγδεζηθ"]
)
def test_every_character_is_reachable(rand, alphabet):
    s = rand.get_string(5000, alphabet)
    assert set(s) == set(alphabet)


@pytest.mark.parametrize(
    "alphabet, secure",
    [
        (BASE64_ALPHABET, True),
        (BASE64_ALPHABET, False),
        (string.ascii_lowercase, True),
        (string.ascii_lowercase, False),
    ],
)
def test_character_frequencies_are_flat(rand, alphabet, secure):
    # Expected 1000 hits per character; a std dev is ~31, so +-15% is ~5 sigma.
    per_char = 1000
    s = rand.get_string(per_char * len(alphabet), alphabet, secure)
    counts = Counter(s)
    assert set(counts) == set(alphabet)
    assert min(counts.values()) > per_char * 0.85
    assert max(counts.values()) < per_char * 1.15


def test_fast_strings(rand):
    s = rand.get_string(64, secure=False)
    assert len(s) == 64 and _B64_RE.match(s)


@pytest.mark.parametrize("length", [0, -3])
def test_string_bad_length(rand, length):
    with pytest.raises(DomainError, match="length must be a positive number"):
        rand.get_string(length)


def test_string_bad_alphabet(rand):
    with pytest.raises(DomainError, match="alphabet must not be empty"):
        rand.get_string(4, "")
    with pytest.raises(InvalidArgumentError):
        rand.get_string(4, ["a", "b"])
    with pytest.raises(InvalidArgumentError):
        rand.get_string("4")


def test_sample_string_is_pure():
    src = ScriptedSource([b"\xff"])
    out = sample_string(src.random_bytes, lambda span: 0, 2, "0123")
    assert out == "33"


# ---------- helpers ----------


@pytest.mark.parametrize("n, expected", [(0, False), (1, True), (2, True), (3, False), (64, True), (65, False), (-4, False)])
def test_is_power_of_two(n, expected):
    assert is_power_of_two(n) is expected


def test_take_bits():
    assert list(take_bits(b"\xab\xcd", 4, 4)) == [0xA, 0xB, 0xC, 0xD]
    assert list(take_bits(b"\xff\x00", 3, 5)) == [7, 7, 6, 0, 0]
    assert list(take_bits(b"\x01\x02", 16, 1)) == [0x0102]
    with pytest.raises(ValueError):
        list(take_bits(b"\x00", 6, 2))
