"""
Bounded-integer sampling through the public API.

The Monte Carlo test generates pairs (x, y) in [0, tot] and checks the ratio of
points above and below the line y = x. A modulo-biased sampler skews this
ratio. The test is inspired by the random number generator test shipped with
Anthony Ferrara's PHP-CryptLib.
"""

import pytest
from hypothesis import given, settings, strategies as st

from randgen import get_integer
from randgen.constants import INT64_MAX, INT64_MIN
from randgen.errors import (
    DomainError,
    EntropyUnavailable,
    InvalidArgumentError,
    RedrawsExhausted,
)

from .helpers import ConstantSource, ScriptedSource


@pytest.mark.parametrize(
    "num, valid, cycles, tot, lo_ratio, hi_ratio, secure",
    [
        (2, 1, 10000, 100, 0.9, 1.1, True),
        (2, 1, 10000, 100, 0.8, 1.2, False),
    ],
)
def test_rand_integer_monte_carlo(rand, num, valid, cycles, tot, lo_ratio, hi_ratio, secure):
    count = 0
    for _ in range(num):
        up = down = 0
        for _ in range(cycles):
            x = rand.get_integer(0, tot, secure)
            y = rand.get_integer(0, tot, secure)
            if x > y:
                up += 1
            elif x < y:
                down += 1
        assert up > 0
        assert down > 0
        if lo_ratio < up / down < hi_ratio:
            count += 1
        if count >= valid:
            break
    assert count >= valid, "The random number generator failed the Monte Carlo test"


@pytest.mark.parametrize(
    "lo, hi", [(0, 100), (-100, 100), (0, 63), (0, 64), (0, 65), (-1, 0)]
)
def test_every_value_is_reached(rand, lo, hi):
    seen = set()
    for _ in range(10000):
        v = rand.get_integer(lo, hi)
        assert lo <= v <= hi
        seen.add(v)
    assert seen == set(range(lo, hi + 1))


def test_integer_range_fail():
    with pytest.raises(DomainError, match="min parameter must be lower than max parameter"):
        get_integer(100, 0)


def test_reversed_bounds_draw_nothing(make_rand):
    src = ScriptedSource([])
    with pytest.raises(DomainError) as ei:
        make_rand(secure=src).get_integer(5, 4)
    assert ei.value.operation == "get_integer"
    assert ei.value.context == {"min": 5, "max": 4}
    assert src.requests == []


def test_get_integer_goes_through_sample_integer(make_rand, monkeypatch):
    import randgen.generator as generator

    calls = []
    real = generator.sample_integer

    def spy(draw, lo, hi, **kw):
        calls.append((lo, hi, kw["op"], kw["mode"]))
        return real(draw, lo, hi, **kw)

    monkeypatch.setattr(generator, "sample_integer", spy)
    r = make_rand(fast=ScriptedSource([b"\x03"]))
    assert r.get_integer(-2, 2, secure=False) == 1
    assert calls == [(-2, 2, "get_integer", "fast")]


@pytest.mark.parametrize(
    "lo, hi", [(0, 1.5), ("0", 10), (None, 3), (0, float("inf")), (False, 3)]
)
def test_non_integer_bounds(rand, lo, hi):
    with pytest.raises(InvalidArgumentError):
        rand.get_integer(lo, hi)


def test_degenerate_interval_consumes_no_entropy(make_rand):
    src = ScriptedSource([])
    r = make_rand(secure=src)
    assert r.get_integer(42, 42) == 42
    assert r.get_integer(INT64_MAX, INT64_MAX) == INT64_MAX
    assert src.requests == []


def test_full_signed_64bit_range_extremes(make_rand):
    src = ScriptedSource([b"\x00" * 8, b"\xff" * 8])
    r = make_rand(secure=src)
    assert r.get_integer(INT64_MIN, INT64_MAX) == INT64_MIN
    assert r.get_integer(INT64_MIN, INT64_MAX) == INT64_MAX
    assert src.requests == [8, 8]


def test_full_signed_64bit_range_random(rand):
    values = [rand.get_integer(INT64_MIN, INT64_MAX) for _ in range(200)]
    assert all(INT64_MIN <= v <= INT64_MAX for v in values)
    assert len(set(values)) > 190
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


def test_zero_to_max_int_is_not_stuck(rand):
    values = [rand.get_integer(0, INT64_MAX) for _ in range(100)]
    assert any(v != 0 for v in values)
    assert sum(values) <= 100 * INT64_MAX
    assert all(0 <= v <= INT64_MAX for v in values)


def test_rejection_redraws_out_of_range_candidates(make_rand):
    # [10, 74] -> span 64 -> 7 bits, 1 byte per candidate, mask 0x7f.
    src = ScriptedSource([b"\xff", b"\x41", b"\xc0"])
    r = make_rand(secure=src)
    # 0xff -> 127 (reject), 0x41 -> 65 (reject), 0xc0 -> 0x40 = 64 (accept)
    assert r.get_integer(10, 74) == 74
    assert src.requests == [1, 1, 1]


def test_stuck_source_exhausts_redraws(make_rand):
    src = ConstantSource(0xFF)
    r = make_rand(secure=src, max_redraws=5)
    with pytest.raises(RedrawsExhausted) as ei:
        r.get_integer(0, 64)
    assert isinstance(ei.value, EntropyUnavailable)
    assert isinstance(ei.value, RuntimeError)
    assert ei.value.mode == "secure"
    assert src.calls == 5


def test_all_zero_source_is_accepted_not_biased_away(make_rand):
    r = make_rand(secure=ConstantSource(0x00))
    assert r.get_integer(-5, 1000) == -5


def test_fast_mode_uses_fast_source(make_rand):
    secure = ScriptedSource([])
    fast = ScriptedSource([b"\x03"])
    r = make_rand(secure=secure, fast=fast)
    assert r.get_integer(0, 3, secure=False) == 3
    assert secure.requests == []


def test_huge_python_ints(rand):
    lo, hi = -(2**200), 2**200
    for _ in range(50):
        assert lo <= rand.get_integer(lo, hi) <= hi


@settings(max_examples=200, deadline=None)
@given(st.integers(), st.integers())
def test_property_result_within_bounds(a, b):
    lo, hi = min(a, b), max(a, b)
    v = get_integer(lo, hi)
    assert lo <= v <= hi


@settings(max_examples=100, deadline=None)
@given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX), st.integers(min_value=1, max_value=2**70))
def test_property_reversed_bounds_always_fail(hi, gap):
    with pytest.raises(DomainError):
        get_integer(hi + gap, hi)
