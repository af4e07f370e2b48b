"""Walks the pixel grid, evaluates an engine and converts to 8-bit intensity."""
import math
import multiprocessing as mp
import os

import numpy as np

from .config import RenderConfig, build_engine
from .errors import NumericDegeneracyError


def to_intensity(value):
    """Map a noise value from [-1, 1] to [0, 255], saturating outside it."""
    if math.isnan(value):
        raise NumericDegeneracyError("Noise value is NaN")
    level = (value + 1.0) * 0.5 * 255.0
    if level <= 0.0:
        return 0
    if level >= 255.0:
        return 255
    return int(level)


def _render_rows(engine, size, scale, y_start, y_stop):
    rows = np.zeros((y_stop - y_start, size), dtype=np.uint8)
    for y in range(y_start, y_stop):
        for x in range(size):
            xf, yf = engine.map_coordinates(x, y, size, scale)
            rows[y - y_start, x] = to_intensity(engine.noise(xf, yf))
    return rows


def _render_band(args):
    return _render_rows(*args)


def _bands(size, threads):
    # Contiguous row ranges, one or more per worker
    count = min(size, threads)
    step, extra = divmod(size, count)
    start = 0
    for i in range(count):
        stop = start + step + (1 if i < extra else 0)
        yield start, stop
        start = stop


def render(size, scale, seed, kind, threads=1):
    """
    Render a ``size`` x ``size`` grid of uint8 intensities, indexed [y, x].

    Rows are independent, so with ``threads`` > 1 they are split into bands
    and evaluated by a process pool. The result does not depend on the
    thread count.
    """
    config = RenderConfig(kind=kind, size=size, scale=scale, seed=seed, threads=threads).validate()
    engine = build_engine(config.kind, config.resolve_seed())

    if config.threads == 1:
        return _render_rows(engine, config.size, config.scale, 0, config.size)

    jobs = [(engine, config.size, config.scale, start, stop) for start, stop in _bands(config.size, config.threads)]
    # More bands than workers is fine, pool.map queues them
    workers = min(len(jobs), os.cpu_count() or 1)
    with mp.Pool(processes=workers) as pool:
        bands = pool.map(_render_band, jobs)
    return np.vstack(bands)


def render_config(config):
    """Render from a validated RenderConfig."""
    return render(config.size, config.scale, config.resolve_seed(), config.kind, config.threads)
