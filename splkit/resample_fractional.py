"""Fractional-ratio FIR resamplers working on blocks of 32-bit samples.

Inputs are normalised (unsaturated) 32-bit values. Outputs are shifted left
by 15 bits with a rounding offset of 16384. Each function needs a few
samples of look-ahead past the last block, as stated in its docstring.
"""

from splkit.fixed import wrap_int32

_ROUND = 1 << 14

_COEFFICIENTS_48_TO_32 = (
    (778, -2050, 1087, 23285, 12903, -3783, 441, 222),
    (222, 441, -3783, 12903, 23285, 1087, -2050, 778),
)

_COEFFICIENTS_32_TO_24 = (
    (767, -2362, 2434, 24406, 10620, -3838, 721, 90),
    (386, -381, -2646, 19062, 19062, -2646, -381, 386),
    (90, 721, -3838, 10620, 24406, 2434, -2362, 767),
)

_COEFFICIENTS_44_TO_32 = (
    (117, -669, 2245, -6183, 26267, 13529, -3245, 845, -138),
    (-101, 612, -2283, 8532, 29790, -5138, 1789, -524, 91),
    (50, -292, 1016, -3064, 32010, 3933, -1147, 315, -53),
    (-156, 974, -3863, 18603, 21691, -6246, 2353, -712, 126),
)


def _check(data, blocks, block_in, reach):
    if blocks < 0:
        raise ValueError("blocks must not be negative")
    needed = block_in * (blocks - 1) + reach if blocks else 0
    if len(data) < needed:
        raise ValueError(f"data must hold at least {needed} samples for {blocks} blocks")


def _forward(data, start, coefs):
    return wrap_int32(_ROUND + sum(c * data[start + k] for k, c in enumerate(coefs)))


def _backward(data, start, coefs):
    return wrap_int32(_ROUND + sum(c * data[start - k] for k, c in enumerate(coefs)))


def resample_48khz_to_32khz(data, blocks):
    """Resample by 2/3: 3 inputs give 2 outputs per block.

    data needs 3 * blocks + 6 samples; returns 2 * blocks values.
    """
    _check(data, blocks, 3, 9)
    return [
        _forward(data, 3 * m + phase, coefs)
        for m in range(blocks)
        for phase, coefs in enumerate(_COEFFICIENTS_48_TO_32)
    ]


def resample_32khz_to_24khz(data, blocks):
    """Resample by 3/4: 4 inputs give 3 outputs per block.

    data needs 4 * blocks + 6 samples; returns 3 * blocks values.
    """
    _check(data, blocks, 4, 10)
    return [
        _forward(data, 4 * m + phase, coefs)
        for m in range(blocks)
        for phase, coefs in enumerate(_COEFFICIENTS_32_TO_24)
    ]


def _block_44_to_32(data, base):
    c0, c1, c2, c3 = _COEFFICIENTS_44_TO_32
    return [
        wrap_int32((data[base + 3] << 15) + _ROUND),
        _forward(data, base, c0),
        _forward(data, base + 2, c1),
        _forward(data, base + 3, c2),
        _forward(data, base + 5, c3),
        _backward(data, base + 14, c2),
        _backward(data, base + 15, c1),
        _backward(data, base + 17, c0),
    ]


def resample_44khz_to_32khz(data, blocks):
    """Resample by 8/11: 11 inputs give 8 outputs per block.

    data needs 11 * blocks + 7 samples; returns 8 * blocks values.
    """
    _check(data, blocks, 11, 18)
    return [value for m in range(blocks) for value in _block_44_to_32(data, 11 * m)]