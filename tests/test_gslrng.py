import pytest

from cbrng.gslrng import GslCbrng
from cbrng.philox import Philox, philox2x32


@pytest.fixture
def rng():
    return GslCbrng(Philox(4, 64), "cbrng")


def test_range_and_name(rng):
    assert rng.min() == 0
    assert rng.max() == 0xFFFFFFFF
    assert rng.name == "cbrng"


def test_full_sequence_from_reference_test(rng):
    saved = [rng.get() for _ in range(5)]
    assert len(saved) == 5
    assert all(x != 0 for x in saved)
    assert all(0 <= x <= 0xFFFFFFFF for x in saved)

    total = sum(rng.uniform() for _ in range(5))
    assert 0.1 * 5 < total < 0.9 * 5
    save = rng.get()

    rng.set(0xDEADBEEF)
    after_seed = [rng.get() for _ in range(5)]
    assert all(x != 0 for x in after_seed)

    rcopy = rng.copy()
    xs = [rng.uniform() for _ in range(5)]
    ys = [rcopy.uniform() for _ in range(5)]
    assert xs == ys
    assert rng.get() != save
    assert 0.1 * 5 < sum(xs) < 0.9 * 5

    rng.set(0)
    assert [rng.get() for _ in range(5)] == saved
    uniforms = [rng.uniform() for _ in range(5)]
    assert all(0.0 <= u < 1.0 for u in uniforms)
    assert rng.get() == save


def test_first_values_come_from_counter_one_last_word_first():
    g = GslCbrng(Philox(2, 32), "p2")
    block = philox2x32((1, 0), (0,))
    assert g.get() == block[1]
    assert g.get() == block[0]


def test_seed_goes_into_first_key_word():
    g = GslCbrng(Philox(2, 32))
    g.set(42)
    block = philox2x32((1, 0), (42,))
    assert [g.get(), g.get()] == [block[1], block[0]]


def test_seed_reduced_to_word_width():
    a = GslCbrng(Philox(2, 32))
    b = GslCbrng(Philox(2, 32))
    a.set((1 << 32) + 7)
    b.set(7)
    assert [a.get() for _ in range(6)] == [b.get() for _ in range(6)]


def test_get_double_is_get_scaled(rng):
    twin = rng.copy()
    assert rng.get_double() * 4294967296.0 == twin.get()
    assert 0.0 <= rng.get_double() < 1.0


def test_copy_is_independent(rng):
    twin = rng.copy()
    first = [rng.get() for _ in range(3)]
    rng.set(99)
    assert [twin.get() for _ in range(3)] == first