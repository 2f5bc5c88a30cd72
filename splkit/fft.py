"""Fixed-point radix-2 complex FFT and inverse FFT on interleaved 16-bit data."""

from splkit.fft_tables import SIN_TABLE_1024
from splkit.fixed import wrap_int16, wrap_int32
from splkit.min_max import max_abs_value_w16

_MAX_POINTS = 1024
_Q_SHIFT = 14
_PRODUCT_ROUND = 1
_QUARTER = 256


def _prepare(data, stages):
    if stages < 0:
        raise ValueError("stages must not be negative")
    if stages > 10:
        raise ValueError("at most 1024 points (10 stages) are supported")
    n = 1 << stages
    if len(data) < 2 * n:
        raise ValueError("data holds fewer than 2 ** stages complex values")
    return n, list(data)


def _stages(n):
    """Yield (half span, table shift) for every butterfly stage."""
    span, table_shift = 1, 9
    while span < n:
        yield span, table_shift
        span <<= 1
        table_shift -= 1


def _butterfly(values, i, j, wr, wi, mode, shift, round2):
    xr, xi = values[2 * j], values[2 * j + 1]
    qr, qi = values[2 * i], values[2 * i + 1]
    if mode == 0:
        tr = wrap_int32(wr * xr - wi * xi) >> 15
        ti = wrap_int32(wr * xi + wi * xr) >> 15
        total_shift = shift
        bias = 0
    else:
        tr = wrap_int32(wr * xr - wi * xi + _PRODUCT_ROUND) >> (15 - _Q_SHIFT)
        ti = wrap_int32(wr * xi + wi * xr + _PRODUCT_ROUND) >> (15 - _Q_SHIFT)
        qr <<= _Q_SHIFT
        qi <<= _Q_SHIFT
        total_shift = shift + _Q_SHIFT
        bias = round2
    values[2 * j] = wrap_int16(wrap_int32(qr - tr + bias) >> total_shift)
    values[2 * j + 1] = wrap_int16(wrap_int32(qi - ti + bias) >> total_shift)
    values[2 * i] = wrap_int16(wrap_int32(qr + tr + bias) >> total_shift)
    values[2 * i + 1] = wrap_int16(wrap_int32(qi + ti + bias) >> total_shift)


def complex_fft(data, stages, mode):
    """Forward 2**stages-point FFT of bit-reversed [re, im, ...] data.

    Each stage halves the values, so the result is the DFT divided by the
    number of points, in normal order. Mode 0 is the fast, less accurate
    variant; any other mode rounds each step. Values past the transformed
    pairs are kept. Raises ValueError for more than 10 stages.
    """
    n, values = _prepare(data, stages)
    for span, table_shift in _stages(n):
        step = span << 1
        for m in range(span):
            t = m << table_shift
            wr = SIN_TABLE_1024[t + _QUARTER]
            wi = -SIN_TABLE_1024[t]
            for i in range(m, n, step):
                _butterfly(values, i, i + span, wr, wi, mode, 1, 1 << _Q_SHIFT)
    return values


def complex_ifft(data, stages, mode):
    """Inverse 2**stages-point FFT of bit-reversed [re, im, ...] data.

    Returns (values, scale): values shifted left by scale give the
    unnormalised inverse transform. Stages are scaled down only when the
    data would otherwise overflow. Raises ValueError for more than 10 stages.
    """
    n, values = _prepare(data, stages)
    scale = 0
    for span, table_shift in _stages(n):
        shift = 0
        round2 = 8192
        peak = max_abs_value_w16(values[:2 * n])
        if peak > 13573:
            shift += 1
            scale += 1
            round2 <<= 1
        if peak > 27146:
            shift += 1
            scale += 1
            round2 <<= 1

        step = span << 1
        for m in range(span):
            t = m << table_shift
            wr = SIN_TABLE_1024[t + _QUARTER]
            wi = SIN_TABLE_1024[t]
            for i in range(m, n, step):
                _butterfly(values, i, i + span, wr, wi, mode, shift, round2)
    return values, scale