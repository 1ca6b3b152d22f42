"""
Python implementation of a 32-bit linear congruential PRNG.

The stream matches d3-random's ``randomLcg`` so that a seed used by the
browser prototype yields the same sequence of draws here, and therefore
the same region growth trace.
"""

import math

_MUL = 0x19660D
_INC = 0x3C6EF35F
_EPS = 1 / 0x100000000  # 2^-32


def _int32(n):
    """Truncate to a signed 32-bit integer (JavaScript ``n | 0``)."""
    if not math.isfinite(n):
        return 0
    n = int(n) & 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


class LcgPRNG:
    """
    Linear congruential generator with a 32-bit state.

    Seeds in [0, 1) are scaled to the full 32-bit range, any other number
    is used by absolute value.
    """

    def __init__(self, seed):
        """Initialize with a numeric seed."""
        self.call_count = 0
        seed = float(seed)
        if 0 <= seed < 1:
            self.state = _int32(seed / _EPS)
        else:
            self.state = _int32(abs(seed))

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        self.state = _int32(_MUL * self.state + _INC)
        return _EPS * (self.state & 0xFFFFFFFF)
