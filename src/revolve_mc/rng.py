"""Combined multiply-add / xorshift / multiply-with-carry generator.

Three 64-bit words are advanced on every draw: an LCG word (u), a xorshift
word (v) and a 32-bit multiply-with-carry word (w). Python ints are masked
back to 64 bits after each step so the stream is bit-identical to the
unsigned C arithmetic it is specified in.
"""

import math

from .types import DEFAULT_SEED, MASK32, MASK64

LCG_MULT: int = 2862933555777941757
LCG_INC: int = 7046029254386353087
V_INIT: int = 4101842887655102017
MWC_MULT: int = 4294957665
UINT64_TO_FLOAT: float = 5.42101086242752217e-20


class RanRNG:
    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed & MASK64
        self.v = V_INIT
        self.w = 1
        self.u = self.seed ^ self.v
        self.int64()
        self.v = self.u
        self.int64()
        self.w = self.v
        self.int64()

    def state(self) -> tuple[int, int, int]:
        return (self.u, self.v, self.w)

    def int64(self) -> int:
        u = (self.u * LCG_MULT + LCG_INC) & MASK64
        v = self.v
        v ^= v >> 17
        v ^= (v << 31) & MASK64
        v ^= v >> 8
        w = MWC_MULT * (self.w & MASK32) + (self.w >> 32)
        self.u, self.v, self.w = u, v, w

        x = (u ^ (u << 21)) & MASK64
        x ^= x >> 35
        x ^= (x << 4) & MASK64
        return ((x + v) & MASK64) ^ w

    def int32(self) -> int:
        return self.int64() & MASK32

    def uniform(self) -> float:
        """Uniform double in [0, 1)."""
        return UINT64_TO_FLOAT * self.int64()

    def bernoulli(self, p: float = 0.5) -> int:
        """Return 1 with probability p, else 0.

        A p outside [0, 1] returns 1 without consuming a draw.
        """
        if p < 0.0 or p > 1.0:
            return 1
        if self.uniform() < p:
            return 1
        return 0

    def exponential(self, rate: float = 1.0) -> float:
        """Exponential variate with the given rate (rate <= 0 is taken as 1)."""
        if rate <= 0.0:
            rate = 1.0
        r = self.uniform()
        while r <= 0.0:
            r = self.uniform()
        return -math.log(r) / rate

    def categorical(self, n: int = 6) -> int:
        """Uniform category in 1..n (n < 3 is taken as 3)."""
        if n < 3:
            n = 3
        return int(1.0 + n * self.uniform())
