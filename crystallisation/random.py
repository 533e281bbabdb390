"""
Random number generator with seed support
"""
import time


class Random:
    """
    Park-Miller linear congruential generator.

    Any object exposing float() and uniform() can stand in for it, which is
    how the growth driver and cutter receive their randomness.
    """

    g = 48271.0
    n = 2147483647

    def __init__(self, seed=-1):
        self.seed = 1
        self.reset(seed)

    def reset(self, seed=-1):
        """Reset random seed"""
        if seed != -1:
            self.seed = int(seed) % int(self.n) or 1
        else:
            self.seed = int(time.time() * 1000) % int(self.n) or 1

    def get_seed(self):
        """Get current seed"""
        return self.seed

    def _next(self):
        """Generate next random number"""
        self.seed = int((self.seed * self.g) % self.n)
        return self.seed

    def float(self):
        """Random float in [0, 1)"""
        return self._next() / self.n

    def uniform(self, a, b=None):
        """Random float in [0, a), or in [a, b) when b is given"""
        if b is None:
            a, b = 0.0, a
        return a + self.float() * (b - a)
