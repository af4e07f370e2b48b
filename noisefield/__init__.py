"""Seeded 2D Perlin and simplex noise rendered to grayscale images."""
from .config import NoiseKind, RenderConfig, build_engine
from .errors import ConfigurationError, NoiseFieldError, NumericDegeneracyError, OutputError
from .image_sink import save_grayscale
from .perlin_noise_gen import Perlin
from .permutation import build_permutation, grad2
from .sampler import render, render_config, to_intensity
from .simplex_noise_gen import Simplex

__all__ = [
    "NoiseKind",
    "RenderConfig",
    "build_engine",
    "build_permutation",
    "grad2",
    "Perlin",
    "Simplex",
    "render",
    "render_config",
    "to_intensity",
    "save_grayscale",
    "NoiseFieldError",
    "ConfigurationError",
    "NumericDegeneracyError",
    "OutputError",
]
