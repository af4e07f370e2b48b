# simplex_noise_gen.py
# 2D simplex noise: triangular cells, three-corner radial falloff

import math

from .permutation import build_permutation, grad2


class Simplex:
    F2 = 0.5 * (math.sqrt(3.0) - 1.0)
    G2 = (3.0 - math.sqrt(3.0)) / 6.0

    def __init__(self, seed):
        self.seed = seed
        self.perm = build_permutation(seed)

    def __repr__(self):
        return "Simplex(seed={})".format(self.seed)

    @classmethod
    def locate(cls, xin, yin):
        """
        Find the simplex containing (xin, yin).

        Returns the skewed cell origin (i, j), the offset (x0, y0) from the
        unskewed origin and the middle corner (i1, j1).
        """
        # Skew the input space to find the containing cell
        s = (xin + yin) * cls.F2
        i = math.floor(xin + s)
        j = math.floor(yin + s)

        # Unskew the cell origin back to (x, y) space
        t = (i + j) * cls.G2
        x0 = xin - (i - t)
        y0 = yin - (j - t)

        # Ties fall to the upper triangle
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1
        return i, j, x0, y0, i1, j1

    @staticmethod
    def _corner(gi, x, y):
        t = 0.5 - x * x - y * y
        if t < 0.0:
            return 0.0
        t *= t
        return t * t * grad2(gi, x, y)

    def noise(self, xin, yin):
        """Standard 2D simplex noise, scaled to roughly [-1, 1]."""
        G2 = self.G2
        i, j, x0, y0, i1, j1 = self.locate(xin, yin)

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        perm = self.perm
        ii = i & 255
        jj = j & 255
        gi0 = perm[(ii + perm[jj % 256]) % 256]
        gi1 = perm[(ii + i1 + perm[(jj + j1) % 256]) % 256]
        gi2 = perm[(ii + 1 + perm[(jj + 1) % 256]) % 256]

        n0 = self._corner(gi0, x0, y0)
        n1 = self._corner(gi1, x1, y1)
        n2 = self._corner(gi2, x2, y2)

        # Empirical factor
        return 70.0 * (n0 + n1 + n2)

    evaluate = noise

    @staticmethod
    def map_coordinates(px, py, size, scale):
        """Pixel to noise domain, shifted down by one unit on both axes."""
        return scale * (px / size) - 1.0, scale * (py / size) - 1.0
