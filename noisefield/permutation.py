"""Seeded permutation table and the 8-way gradient shared by both engines."""
import random

from .errors import ConfigurationError

TABLE_SIZE = 256


def build_permutation(seed):
    """
    Shuffle 0..255 with a generator seeded only from ``seed``.

    A private ``random.Random`` is used so the global generator is left
    alone and two tables built from the same seed are always equal.
    """
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise ConfigurationError("Seed must be an unsigned integer, got {!r}".format(seed))
    p = list(range(TABLE_SIZE))
    random.Random(seed).shuffle(p)
    return tuple(p)


def grad2(hash, x, y):
    # Low 3 bits pick the axis order and two sign bits
    h = hash & 7
    u = x if h < 4 else y
    v = y if h < 4 else x
    res = -u if h & 1 else u
    if h & 2:
        res -= 2.0 * v
    else:
        res += 2.0 * v
    return res
