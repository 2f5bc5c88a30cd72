"""Sine table with 1024 points per period, in Q15, for the fixed-point FFT."""

import math

# Entry k of the rising quarter is floor(32767 * sin(2*pi*k / 1024)), k = 0..256.
_QUARTER_WAVE = tuple(
    math.floor(32767 * math.sin(math.pi * k / 512)) for k in range(257)
)

# The positive half mirrors around index 256; the negative half repeats it negated.
_POSITIVE_HALF = _QUARTER_WAVE + _QUARTER_WAVE[255:0:-1]

SIN_TABLE_1024 = _POSITIVE_HALF + tuple(-value for value in _POSITIVE_HALF)