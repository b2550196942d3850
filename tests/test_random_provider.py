import pytest

from wheeloffortune.utils.random_provider import RandomProvider


def test_same_seed_same_sequence():
    a, b = RandomProvider(seed=99), RandomProvider(seed=99)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
    assert [a.randrange(20) for _ in range(10)] == [b.randrange(20) for _ in range(10)]
    assert a.sample(range(10), 5) == b.sample(range(10), 5)


def test_sample_without_replacement():
    rng = RandomProvider(seed=5)
    picked = rng.sample(range(6), 5)
    assert len(picked) == len(set(picked)) == 5


def test_randrange_requires_positive_stop():
    with pytest.raises(ValueError):
        RandomProvider(seed=1).randrange(0)
