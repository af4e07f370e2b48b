import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError
from .perlin_noise_gen import Perlin
from .simplex_noise_gen import Simplex


class NoiseKind(Enum):
    PERLIN = "perlin"
    SIMPLEX = "simplex"

    @classmethod
    def from_name(cls, name):
        for kind in cls:
            if kind.value == name:
                return kind
        raise ConfigurationError("Unsupported noise type: {}".format(name))

    @classmethod
    def names(cls):
        return [kind.value for kind in cls]


ENGINES = {
    NoiseKind.PERLIN: Perlin,
    NoiseKind.SIMPLEX: Simplex,
}


def build_engine(kind, seed):
    """Build the engine for ``kind``. Accepts a NoiseKind or its name."""
    if not isinstance(kind, NoiseKind):
        kind = NoiseKind.from_name(kind)
    return ENGINES[kind](seed)


def _choose_seed(seed: Optional[int]) -> int:
    return seed if seed is not None else random.SystemRandom().randrange(0, 2**64)


@dataclass
class RenderConfig:
    kind: NoiseKind = NoiseKind.SIMPLEX
    size: int = 1024
    scale: float = 2.0
    seed: Optional[int] = None
    threads: int = 1
    out: str = "noise.png"

    def __post_init__(self) -> None:
        if not isinstance(self.kind, NoiseKind):
            self.kind = NoiseKind.from_name(self.kind)

    def validate(self) -> "RenderConfig":
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ConfigurationError("Image size must be a positive integer, got {!r}".format(self.size))
        if isinstance(self.scale, bool) or not isinstance(self.scale, (int, float)):
            raise ConfigurationError("Scale must be a number, got {!r}".format(self.scale))
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ConfigurationError("Scale must be positive and finite, got {!r}".format(self.scale))
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise ConfigurationError("Seed must be an unsigned integer, got {!r}".format(self.seed))
        if isinstance(self.threads, bool) or not isinstance(self.threads, int) or self.threads < 1:
            raise ConfigurationError("Thread count must be at least 1, got {!r}".format(self.threads))
        return self

    def resolve_seed(self) -> int:
        """Pin the seed, drawing one from system entropy if none was given."""
        self.seed = _choose_seed(self.seed)
        return self.seed
