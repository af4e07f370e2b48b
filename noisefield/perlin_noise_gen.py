# perlin_noise_gen.py
# Classic 2D gradient noise over a square lattice with the quintic fade

import math

from .permutation import build_permutation, grad2


class Perlin:
    def __init__(self, seed):
        self.seed = seed
        # Permutation table, built once and never mutated
        self.p = build_permutation(seed)

    def __repr__(self):
        return "Perlin(seed={})".format(self.seed)

    @staticmethod
    def fade(t):
        # 6t^5 - 15t^4 + 10t^3
        return t * t * t * (t * (t * 6 - 15) + 10)

    @staticmethod
    def lerp(t, a, b):
        return a + t * (b - a)

    def noise(self, x, y):
        xi = math.floor(x)
        yi = math.floor(y)

        xf = x - xi
        yf = y - yi

        u = self.fade(xf)
        v = self.fade(yf)

        p = self.p
        x0 = xi & 255
        x1 = (xi + 1) & 255
        y0 = p[yi & 255]
        y1 = p[(yi + 1) & 255]

        # Combined index is masked too so it stays inside the table
        aa = p[(x0 + y0) & 255]
        ab = p[(x0 + y1) & 255]
        ba = p[(x1 + y0) & 255]
        bb = p[(x1 + y1) & 255]

        n0 = self.lerp(u, grad2(aa, xf, yf), grad2(ba, xf - 1, yf))
        n1 = self.lerp(u, grad2(ab, xf, yf - 1), grad2(bb, xf - 1, yf - 1))
        return self.lerp(v, n0, n1)

    evaluate = noise

    @staticmethod
    def map_coordinates(px, py, size, scale):
        """Pixel to noise domain, origin at the image corner."""
        return scale * (px / size), scale * (py / size)
