"""Integer divisions with the fixed-point conventions of the library."""

from splkit.fixed import INT16_MAX, INT32_MAX, UINT32_MAX, wrap_int16, wrap_int32


def _trunc_div(num, den):
    """Integer division rounding toward zero."""
    quotient = abs(num) // abs(den)
    return quotient if (num < 0) == (den < 0) else -quotient


def div_u32_u16(num, den):
    """Divide an unsigned 32-bit value by an unsigned 16-bit one; 0xFFFFFFFF if den is 0."""
    num &= UINT32_MAX
    den &= 0xFFFF
    if den == 0:
        return UINT32_MAX
    return num // den


def div_w32_w16(num, den):
    """Divide a signed 32-bit value by a signed 16-bit one; 0x7FFFFFFF if den is 0."""
    if den == 0:
        return INT32_MAX
    return wrap_int32(_trunc_div(num, den))


def div_w32_w16_res_w16(num, den):
    """Divide a signed 32-bit value by a signed 16-bit one into 16 bits; 0x7FFF if den is 0."""
    if den == 0:
        return INT16_MAX
    return wrap_int16(_trunc_div(num, den))


def div_result_in_q31(num, den):
    """Quotient num / den in Q31, assuming |num| < |den|."""
    if num == 0:
        return 0
    negatives = 0
    l_num, l_den = num, den
    if num < 0:
        negatives += 1
        l_num = wrap_int32(-num)
    if den < 0:
        negatives += 1
        l_den = wrap_int32(-den)
    result = 0
    for _ in range(31):
        result = wrap_int32(result << 1)
        l_num = wrap_int32(l_num << 1)
        if l_num >= l_den:
            l_num = wrap_int32(l_num - l_den)
            result += 1
    return -result if negatives == 1 else result


def div_w32_hi_low(num, den_hi, den_low):
    """Divide num by a denominator in hi/low format; the result is in Q31."""
    approx = wrap_int16(div_w32_w16(0x1FFFFFFF, den_hi))

    tmp = wrap_int32(((den_hi * approx) << 1) + (((den_low * approx) >> 15) << 1))
    tmp = wrap_int32(INT32_MAX - tmp)

    tmp_hi = wrap_int16(tmp >> 16)
    tmp_low = wrap_int16((tmp - (tmp_hi << 16)) >> 1)

    tmp = wrap_int32((tmp_hi * approx + ((tmp_low * approx) >> 15)) << 1)

    tmp_hi = wrap_int16(tmp >> 16)
    tmp_low = wrap_int16((tmp - (tmp_hi << 16)) >> 1)

    num_hi = wrap_int16(num >> 16)
    num_low = wrap_int16((num - (num_hi << 16)) >> 1)

    tmp = wrap_int32(
        num_hi * tmp_hi + ((num_hi * tmp_low) >> 15) + ((num_low * tmp_hi) >> 15)
    )
    return wrap_int32(tmp << 3)