import math
import types

import numpy as np
import pytest

from noisefield.config import NoiseKind, RenderConfig, build_engine
from noisefield.errors import ConfigurationError, NumericDegeneracyError
from noisefield.perlin_noise_gen import Perlin
from noisefield.sampler import render, render_config, to_intensity
from noisefield.simplex_noise_gen import Simplex


def test_to_intensity_maps_unit_range():
    assert to_intensity(-1.0) == 0
    assert to_intensity(0.0) == 127
    assert to_intensity(1.0) == 255


def test_to_intensity_saturates():
    assert to_intensity(-5.0) == 0
    assert to_intensity(5.0) == 255
    assert to_intensity(math.inf) == 255
    assert to_intensity(-math.inf) == 0


def test_to_intensity_rejects_nan():
    with pytest.raises(NumericDegeneracyError):
        to_intensity(math.nan)


def test_end_to_end_perlin_scenario():
    grid = render(4, 2.0, 42, "perlin")
    assert grid.shape == (4, 4)
    assert grid.dtype == np.uint8
    assert np.array_equal(grid, render(4, 2.0, 42, "perlin"))
    assert not np.array_equal(grid, render(4, 2.0, 43, "perlin"))


def test_render_matches_engine_per_pixel():
    size, scale = 8, 3.0
    grid = render(size, scale, 9, NoiseKind.SIMPLEX)
    engine = Simplex(9)
    for y in range(size):
        for x in range(size):
            xf = scale * x / size - 1.0
            yf = scale * y / size - 1.0
            assert grid[y, x] == to_intensity(engine.noise(xf, yf))


def test_perlin_corner_pixel_is_mid_gray():
    # (0, 0) maps onto a lattice point, where Perlin noise is zero
    assert render(8, 2.0, 1, "perlin")[0, 0] == 127


@pytest.mark.parametrize("kind", ["perlin", "simplex"])
@pytest.mark.parametrize("seed", [0, 42, 2**40])
def test_render_range_bound(kind, seed):
    grid = render(24, 5.0, seed, kind)
    assert grid.shape == (24, 24)
    assert int(grid.min()) >= 0
    assert int(grid.max()) <= 255
    # Not a flat image
    assert grid.min() != grid.max()


def test_threaded_render_matches_single_thread():
    single = render(17, 4.0, 7, "simplex", threads=1)
    threaded = render(17, 4.0, 7, "simplex", threads=3)
    assert np.array_equal(single, threaded)


def test_more_threads_than_rows():
    assert np.array_equal(render(3, 2.0, 5, "perlin", threads=8), render(3, 2.0, 5, "perlin"))


def test_render_without_seed_still_renders():
    grid = render(4, 2.0, None, "simplex")
    assert grid.shape == (4, 4)


def test_render_config():
    config = RenderConfig(kind="perlin", size=4, scale=2.0, seed=42)
    assert np.array_equal(render_config(config), render(4, 2.0, 42, "perlin"))


@pytest.mark.parametrize(
    "size, scale, seed, kind, threads",
    [
        (0, 2.0, 1, "perlin", 1),
        (-4, 2.0, 1, "perlin", 1),
        (4.5, 2.0, 1, "perlin", 1),
        (4, 0.0, 1, "perlin", 1),
        (4, -1.0, 1, "perlin", 1),
        (4, math.nan, 1, "perlin", 1),
        (4, math.inf, 1, "perlin", 1),
        (4, 2.0, -1, "perlin", 1),
        (4, 2.0, True, "perlin", 1),
        (4, 2.0, 1, "Perlin", 1),
        (4, 2.0, 1, "opensimplex", 1),
        (4, 2.0, 1, "perlin", 0),
    ],
)
def test_render_rejects_bad_config(size, scale, seed, kind, threads):
    with pytest.raises(ConfigurationError):
        render(size, scale, seed, kind, threads=threads)


def test_noise_kind_from_name():
    assert NoiseKind.from_name("perlin") is NoiseKind.PERLIN
    assert NoiseKind.from_name("simplex") is NoiseKind.SIMPLEX
    with pytest.raises(ConfigurationError, match="Unsupported noise type"):
        NoiseKind.from_name("SIMPLEX")


def test_build_engine_dispatch():
    assert isinstance(build_engine(NoiseKind.PERLIN, 1), Perlin)
    assert isinstance(build_engine("simplex", 1), Simplex)


def test_resolve_seed_keeps_pinned_seed():
    assert RenderConfig(seed=42).resolve_seed() == 42
    drawn = RenderConfig().resolve_seed()
    assert 0 <= drawn < 2**64


class _RecordingPool:
    created = []

    def __init__(self, processes):
        self.processes = processes
        _RecordingPool.created.append(processes)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def map(self, fn, jobs):
        return [fn(job) for job in jobs]


def test_worker_count_is_capped_at_cpu_count(monkeypatch):
    from noisefield import sampler

    _RecordingPool.created = []
    monkeypatch.setattr(sampler, "mp", types.SimpleNamespace(Pool=_RecordingPool))
    monkeypatch.setattr(sampler.os, "cpu_count", lambda: 2)
    grid = render(10, 3.0, 5, "perlin", threads=6)
    assert _RecordingPool.created == [2]
    assert np.array_equal(grid, render(10, 3.0, 5, "perlin"))
