"""PRNG state handling and the inclusive range sampler."""

import threading

import pytest

from numerics import Found, Generator, InvalidArgument, NumericsError, get32, random_range, reseed
from numerics import prng
from numerics.basics import INT32_MAX, UINT32_MAX


def test_first_step_from_seed_one():
    # 1 * 0xEA5F3F01 -> low word 0xEA5F3F01, plus its upper half 0xEA5F
    assert Generator(seed=1).get32() == 0xEA602960


def test_same_seed_same_sequence():
    a, b = Generator(seed=4242), Generator(seed=4242)
    assert [a.get32() for _ in range(50)] == [b.get32() for _ in range(50)]


def test_stateless_mode_chains_like_stateful_and_touches_nothing(gen):
    seq = [gen.get32() for _ in range(20)]

    other = Generator(seed=999)
    before = other.state
    x, chained = 12345, []
    for _ in range(20):
        x = other.get32(x)
        chained.append(x)

    assert chained == seq
    assert other.state == before


def test_stateless_mode_rejects_wide_state(gen):
    with pytest.raises(NumericsError):
        gen.get32(UINT32_MAX + 1)


def test_seed_must_be_nonzero_u32():
    with pytest.raises(NumericsError):
        Generator(seed=0)
    with pytest.raises(NumericsError):
        Generator(seed=UINT32_MAX + 1)


def test_lazy_clock_seeding(monkeypatch):
    monkeypatch.setattr(prng.time, "time", lambda: 1000.0)
    g = Generator()
    assert not g.seeded
    first = g.get32()
    assert g.seeded
    assert first == Generator(seed=1000).get32()


def test_reseed_is_idempotent_until_reset(monkeypatch):
    clock = iter([1000.0, 2000.0, 3000.0])
    monkeypatch.setattr(prng.time, "time", lambda: next(clock))

    g = Generator()
    g.reseed()
    assert g.state == 1000
    g.reseed()
    assert g.state == 1000

    g.reset()
    g.reseed()
    assert g.state == 2000


def test_reseed_does_not_override_explicit_seed(gen):
    gen.reseed()
    assert gen.state == 12345


def test_range_stays_in_bounds(gen):
    for lo, hi in [(10, 20), (0, 32000), (5, 5), (INT32_MAX - 1, INT32_MAX), (0, UINT32_MAX)]:
        for _ in range(200):
            res = gen.range(lo, hi)
            assert isinstance(res, Found)
            assert lo <= res.value <= hi


def test_range_sweeps(gen):
    for hi in range(1, 300):
        assert 0 <= gen.range(0, hi).unwrap() <= hi
    top = 21191
    for lo in range(0, top, 37):
        assert lo <= gen.range(lo, top).unwrap() <= top


def test_range_zero_max_means_full_range(gen):
    values = [gen.range(0, 0).unwrap() for _ in range(500)]
    assert all(0 <= v <= INT32_MAX for v in values)
    assert max(values) > 1000


def test_range_endpoints_are_reachable():
    seen = set()
    for seed in range(1, 400):
        g = Generator(seed=seed)
        for _ in range(5):
            seen.add(g.range(10, 20).unwrap())
    assert seen == set(range(10, 21))


def test_range_scaling_at_raw_extremes(gen, monkeypatch):
    monkeypatch.setattr(gen, "get32", lambda state=0: UINT32_MAX)
    assert gen.range(10, 20) == Found(20)
    assert gen.range(0, UINT32_MAX) == Found(UINT32_MAX)
    monkeypatch.setattr(gen, "get32", lambda state=0: 0)
    assert gen.range(10, 20) == Found(10)


def test_range_rejects_bad_bounds(gen):
    res = gen.range(20, 10)
    assert isinstance(res, InvalidArgument)
    with pytest.raises(NumericsError):
        res.unwrap()
    assert isinstance(gen.range(0, UINT32_MAX + 1), InvalidArgument)


def test_module_level_functions():
    reseed()
    assert 0 <= get32() <= UINT32_MAX
    assert get32(1) == 0xEA602960
    assert 10 <= random_range(10, 20).unwrap() <= 20
    assert isinstance(random_range(3, 2), InvalidArgument)


def test_threads_share_one_sequence_without_losing_draws():
    shared = Generator(seed=777)
    reference = Generator(seed=777)
    expected = sorted(reference.get32() for _ in range(2000))

    results = [[] for _ in range(4)]

    def worker(out):
        for _ in range(500):
            out.append(shared.get32())

    threads = [threading.Thread(target=worker, args=(r,)) for r in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(v for r in results for v in r) == expected
