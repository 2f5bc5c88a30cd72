"""Integer square root computed with a fixed-point Taylor series."""

from splkit.fixed import INT32_MAX, INT32_MIN, norm_w32, wrap_int16, wrap_int32

_K_SQRT_2 = 23170  # 1/sqrt(2) in Q15


def sqrt_local(value):
    """Square root of a Q31 value in [0.5, 1), returned in Q31."""
    half = value // 2 if value >= 0 else -((-value) // 2)

    b = wrap_int32(half - 0x40000000)
    x_half = wrap_int16(b >> 16)
    b = wrap_int32(b + 0x40000000)
    b = wrap_int32(b + 0x40000000)

    x2 = wrap_int32(x_half * x_half * 2)
    a = wrap_int32(-x2)
    b = wrap_int32(b + (a >> 1))

    a >>= 16
    a = wrap_int32(a * a * 2)
    t16 = wrap_int16(a >> 16)
    b = wrap_int32(b + -20480 * t16 * 2)

    a = wrap_int32(x_half * t16 * 2)
    t16 = wrap_int16(a >> 16)
    b = wrap_int32(b + 28672 * t16 * 2)

    t16 = wrap_int16(x2 >> 16)
    a = wrap_int32(x_half * t16 * 2)
    b = wrap_int32(b + (a >> 1))

    return wrap_int32(b + 32768)


def sqrt(value):
    """Integer square root of |value| for a signed 32-bit value."""
    a = wrap_int32(value)
    if a < 0:
        a = INT32_MAX if a == INT32_MIN else -a
    elif a == 0:
        return 0

    shift = norm_w32(a)
    a = wrap_int32(a << shift)
    if a < INT32_MAX - 32767:
        a += 32768
    else:
        a = INT32_MAX

    x_norm = wrap_int16(a >> 16)
    nshift = shift // 2

    a = wrap_int32(x_norm << 16)
    a = wrap_int32(abs(a))
    a = sqrt_local(a)

    if 2 * nshift == shift:
        t16 = wrap_int16(a >> 16)
        a = wrap_int32(_K_SQRT_2 * t16 * 2)
        a = wrap_int32(a + 32768)
        a &= 0x7FFF0000
        a >>= 15
    else:
        a >>= 16

    a &= 0x0000FFFF
    return a >> nshift